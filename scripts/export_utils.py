#!/usr/bin/env python3
"""Shared helpers for the Figma export generators."""
from __future__ import annotations

import json
import pathlib
import sys
from typing import Any

LOG_PREFIX = "[figma-export]"

_quiet = False


def set_quiet(quiet: bool) -> None:
    global _quiet
    _quiet = quiet


def log_info(message: str) -> None:
    if not _quiet:
        print(f"{LOG_PREFIX} {message}")


def log_warn(message: str) -> None:
    print(f"{LOG_PREFIX} warning: {message}", file=sys.stderr)


def log_error(message: str) -> None:
    print(f"{LOG_PREFIX} error: {message}", file=sys.stderr)


def ensure_dirs(*dirs: pathlib.Path) -> None:
    for directory in dirs:
        directory.mkdir(parents=True, exist_ok=True)


def dump_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def write_if_changed(dest: pathlib.Path, content: str) -> bool:
    """Write text to dest unless the file already holds exactly that text."""
    return write_bytes_if_changed(dest, content.encode("utf-8"))


def write_bytes_if_changed(dest: pathlib.Path, data: bytes) -> bool:
    if dest.exists() and dest.read_bytes() == data:
        return False
    dest.parent.mkdir(parents=True, exist_ok=True)
    dest.write_bytes(data)
    return True
