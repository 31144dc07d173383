#!/usr/bin/env python3
"""
Convert the design token document into Figma-ready artefacts.

Outputs (relative to the export directory):
  - tokens/figma-variables.json  Figma Variables import document
  - tokens/tokens.css            :root custom properties for colours and spacing
  - assets/swatches/<name>.png   one solid swatch per hex colour token

Usage: python3 scripts/export_tokens.py <tokens.json|tokens.yaml> <export-dir>
"""
from __future__ import annotations

import io
import json
import sys
from pathlib import Path
from typing import Any, Dict, Iterator, List, Tuple

from PIL import Image

try:
    import yaml  # type: ignore
except ImportError:
    print("error: PyYAML is required (pip install pyyaml)", file=sys.stderr)
    sys.exit(2)

from export_utils import (
    dump_json,
    ensure_dirs,
    log_info,
    log_warn,
    write_bytes_if_changed,
    write_if_changed,
)

FIGMA_VARIABLES_JSON = "figma-variables.json"
TOKENS_CSS = "tokens.css"
SWATCH_DIR = "swatches"
SWATCH_SIZE = 64
FIGMA_COLLECTION = "core"

# (section path in the token document, figma key prefix, figma type, scopes)
CATEGORY_TABLE: List[Tuple[Tuple[str, ...], str, str, List[str]]] = [
    (("colors",), "color", "color", ["ALL_SCOPES"]),
    (("spacing",), "spacing", "dimension", ["GAP", "SPACING", "WIDTH_HEIGHT"]),
    (("typography", "font-size"), "typography/size", "dimension", ["FONT_SIZE"]),
]

REQUIRED_SECTIONS = ("colors", "spacing")


class TokenDocumentError(ValueError):
    """Raised when the token document is missing or malformed."""


def _parse_document(path: Path, text: str) -> Any:
    if path.suffix.lower() in (".yaml", ".yml"):
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise TokenDocumentError(f"Invalid YAML in {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise TokenDocumentError(f"Invalid JSON in {path}: {exc}") from exc


def _valid_name(name: Any) -> bool:
    # Names become file names under assets/swatches/.
    return (
        isinstance(name, str)
        and name not in ("", ".", "..")
        and "/" not in name
        and "\\" not in name
    )


def _valid_value(value: Any) -> bool:
    return isinstance(value, (str, int, float)) and not isinstance(value, bool)


def _check_section(path: Path, label: str, section: Any) -> None:
    if not isinstance(section, dict):
        raise TokenDocumentError(f"{path}: '{label}' must be a mapping of tokens")
    for name, token in section.items():
        if not _valid_name(name):
            raise TokenDocumentError(f"{path}: invalid token name {name!r} in '{label}'")
        if not isinstance(token, dict) or "value" not in token:
            raise TokenDocumentError(f"{path}: token '{label}.{name}' has no value")
        if not _valid_value(token["value"]):
            raise TokenDocumentError(
                f"{path}: token '{label}.{name}' value must be a string or number, got {token['value']!r}"
            )


def load_tokens(path: Path) -> Dict[str, Any]:
    """Read and validate the token document at ``path``."""
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise TokenDocumentError(f"Token document not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise TokenDocumentError(f"{path}: not valid UTF-8 ({exc})") from exc
    except OSError as exc:
        raise TokenDocumentError(f"Cannot read token document {path}: {exc}") from exc
    data = _parse_document(path, text)
    if not isinstance(data, dict):
        raise TokenDocumentError(f"{path}: expected a mapping at the top level")
    for key in REQUIRED_SECTIONS:
        if key not in data:
            raise TokenDocumentError(f"{path}: missing '{key}' section")
        _check_section(path, key, data[key])
    typography = data.get("typography")
    if typography is not None:
        if not isinstance(typography, dict):
            raise TokenDocumentError(f"{path}: 'typography' must be a mapping")
        if typography.get("font-size") is not None:
            _check_section(path, "typography.font-size", typography["font-size"])
    return data


def _section(tokens: Dict[str, Any], keys: Tuple[str, ...]) -> Dict[str, Any]:
    node: Any = tokens
    for key in keys:
        if not isinstance(node, dict):
            return {}
        node = node.get(key)
    return node or {}


def iter_tokens(tokens: Dict[str, Any]) -> Iterator[Tuple[str, str, List[str], str, Dict[str, Any]]]:
    """Yield (figma key, type, scopes, name, token) in category then input order."""
    for keys, prefix, token_type, scopes in CATEGORY_TABLE:
        for name, token in _section(tokens, keys).items():
            yield f"{prefix}/{name}", token_type, scopes, name, token


def build_figma_variables(tokens: Dict[str, Any]) -> Dict[str, Any]:
    figma_tokens: Dict[str, Any] = {}
    for key, token_type, scopes, _name, token in iter_tokens(tokens):
        figma_tokens[key] = {
            "type": token_type,
            "value": token["value"],
            "description": token.get("description") or "",
            "extensions": {
                "figma": {
                    "collection": FIGMA_COLLECTION,
                    "scopes": list(scopes),
                }
            },
        }
    return {
        "version": "1.0.0",
        "collections": {
            FIGMA_COLLECTION: {
                "name": "Core Tokens",
                "modes": ["light", "dark"],
                "variables": {},
            }
        },
        "tokens": figma_tokens,
    }


def render_tokens_css(tokens: Dict[str, Any]) -> str:
    colors = [f"  --color-{name}: {token['value']};" for name, token in tokens["colors"].items()]
    spacing = [f"  --spacing-{name}: {token['value']};" for name, token in tokens["spacing"].items()]
    lines = ["/* Design tokens for Figma import */", ":root {"]
    lines.extend(colors)
    lines.append("")
    lines.extend(spacing)
    lines.append("}")
    return "\n".join(lines) + "\n"


def hex_to_rgb(value: str) -> Tuple[int, int, int]:
    hx = value.strip()
    if not hx.startswith("#"):
        raise ValueError(f"not a hex colour: {value!r}")
    hx = hx[1:]
    if len(hx) == 3:
        hx = "".join(c * 2 for c in hx)
    if len(hx) != 6:
        raise ValueError(f"not a hex colour: {value!r}")
    r = int(hx[0:2], 16)
    g = int(hx[2:4], 16)
    b = int(hx[4:6], 16)
    return (r, g, b)


def render_swatch(value: str, size: int = SWATCH_SIZE) -> bytes:
    img = Image.new("RGB", (size, size), hex_to_rgb(value))
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()


def write_swatches(tokens: Dict[str, Any], swatch_dir: Path) -> int:
    """Write one swatch per hex colour token and prune swatches no token produced."""
    produced = set()
    for name, token in tokens["colors"].items():
        try:
            data = render_swatch(str(token["value"]))
        except ValueError:
            log_warn(f"Skipping swatch for color '{name}' ({token['value']!r} is not a hex colour)")
            continue
        dest = swatch_dir / f"{name}.png"
        write_bytes_if_changed(dest, data)
        produced.add(dest.name)
    if swatch_dir.is_dir():
        for stale in sorted(swatch_dir.glob("*.png")):
            if stale.name not in produced:
                log_info(f"Removing stale swatch {stale.name}")
                stale.unlink()
    return len(produced)


def export_design_tokens(tokens_path: Path, tokens_dir: Path, assets_dir: Path) -> Dict[str, int]:
    log_info("Exporting design tokens...")
    tokens = load_tokens(tokens_path)
    ensure_dirs(tokens_dir, assets_dir)

    figma = build_figma_variables(tokens)
    write_if_changed(tokens_dir / FIGMA_VARIABLES_JSON, dump_json(figma))
    write_if_changed(tokens_dir / TOKENS_CSS, render_tokens_css(tokens))
    swatches = write_swatches(tokens, assets_dir / SWATCH_DIR)

    summary = {
        "tokens": len(figma["tokens"]),
        "colors": len(tokens["colors"]),
        "spacing": len(tokens["spacing"]),
        "swatches": swatches,
    }
    log_info(f"Design tokens exported ({summary['tokens']} variables, {swatches} swatches)")
    return summary


def main(argv: List[str]) -> int:
    if len(argv) != 2:
        print("usage: export_tokens.py <tokens.json|tokens.yaml> <export-dir>", file=sys.stderr)
        return 2
    out_dir = Path(argv[1])
    export_design_tokens(Path(argv[0]), out_dir / "tokens", out_dir / "assets")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
