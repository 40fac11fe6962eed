"""Minimum Zig version lookup in ``build.zig.zon`` manifests."""

from __future__ import annotations

import re
from pathlib import Path

from py_app_dev.core.logging import logger

MANIFEST_FILE = "build.zig.zon"

_MINIMUM_ZIG_VERSION = re.compile(r'\.?\s*minimum_zig_version\s*=\s*"(.*?)"')


def extract_minimum_zig_version(text: str) -> str | None:
    """
    Return the quoted ``minimum_zig_version`` value found in *text*.

    The value is returned verbatim, so pre-release and build metadata such as
    ``0.15.0-dev.345+ec2888858`` survive untouched. Returns ``None`` when no
    declaration is present.
    """
    match = _MINIMUM_ZIG_VERSION.search(text)
    return match.group(1) if match else None


def read_minimum_zig_version(manifest_path: Path) -> str | None:
    """
    Read *manifest_path* and return its minimum Zig version, if any.

    A missing or unreadable manifest is not an error: it is logged and
    ``None`` is returned so the caller can fall back to ``latest``.
    """
    try:
        text = manifest_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.info(f"Failed to read {manifest_path.name} (using latest): {e}")
        return None

    logger.debug(f"Read {len(text)} bytes from {manifest_path}")
    version = extract_minimum_zig_version(text)
    if not version:
        logger.info(f"Failed to find minimum_zig_version in {manifest_path.name} (using latest)")
        return None
    return version
