#!/usr/bin/env python3
"""Prepare a Figma-ready export of the hotel booking design system.

Reads the design token document and writes, under the export directory
(``exports/figma-ready`` by default):

  tokens/figma-variables.json, tokens/tokens.css, assets/swatches/*.png,
  components/<Name>.md, pages/README.md, navigation-flow.json, IMPORT-GUIDE.md

Every output is fully regenerated on each run; unchanged files are left alone.
"""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List

from export_flow import write_import_guide, write_navigation_flow
from export_specs import write_component_specs, write_pages_guide
from export_tokens import TokenDocumentError, export_design_tokens
from export_utils import ensure_dirs, log_error, log_info, set_quiet

DEFAULT_TOKENS = "tokens/design-tokens.json"
DEFAULT_OUTDIR = "exports/figma-ready"

NEXT_STEPS = [
    "Run: node scripts/capture-screens.js",
    "Open Figma and follow the guide: exports/figma-ready/IMPORT-GUIDE.md",
    "Use the screenshots as reference to rebuild components",
    "Set up the interactive prototype with navigation",
]


@dataclass
class ExportPaths:
    output: Path

    @property
    def components(self) -> Path:
        return self.output / "components"

    @property
    def pages(self) -> Path:
        return self.output / "pages"

    @property
    def assets(self) -> Path:
        return self.output / "assets"

    @property
    def tokens(self) -> Path:
        return self.output / "tokens"

    def all_dirs(self) -> List[Path]:
        return [self.output, self.components, self.pages, self.assets, self.tokens]


def prepare_export(tokens_path: Path, output_dir: Path) -> Dict[str, Any]:
    """Run every export step in order and return a summary of what was written."""
    log_info("Preparing Figma export...")
    paths = ExportPaths(output_dir)
    ensure_dirs(*paths.all_dirs())

    summary: Dict[str, Any] = {}
    summary["tokens"] = export_design_tokens(tokens_path, paths.tokens, paths.assets)
    summary["components"] = write_component_specs(paths.components)
    summary["pages"] = write_pages_guide(paths.pages)
    summary["navigation"] = write_navigation_flow(paths.output)
    summary["guide"] = write_import_guide(paths.output)

    log_info(f"Export ready in {paths.output}")
    return summary


def print_next_steps() -> None:
    print("\nExport complete!")
    print("\nNext steps:")
    for idx, step in enumerate(NEXT_STEPS, start=1):
        print(f"{idx}. {step}")


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Prepare a Figma-ready export of the design system.")
    parser.add_argument(
        "--tokens",
        help=f"Design token document, JSON or YAML (defaults to $FIGMA_EXPORT_TOKENS or {DEFAULT_TOKENS})",
    )
    parser.add_argument(
        "--out",
        help=f"Destination directory (defaults to $FIGMA_EXPORT_OUTDIR or {DEFAULT_OUTDIR})",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress logs.",
    )
    return parser.parse_args(argv)


def main(argv: List[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    set_quiet(args.quiet)

    tokens_path = Path(args.tokens or os.environ.get("FIGMA_EXPORT_TOKENS") or DEFAULT_TOKENS)
    out_dir = Path(args.out or os.environ.get("FIGMA_EXPORT_OUTDIR") or DEFAULT_OUTDIR)

    try:
        prepare_export(tokens_path, out_dir)
    except TokenDocumentError as exc:
        log_error(str(exc))
        return 1
    except OSError as exc:
        log_error(f"write failed: {exc}")
        return 1

    if not args.quiet:
        print_next_steps()
    return 0


if __name__ == "__main__":
    sys.exit(main())
