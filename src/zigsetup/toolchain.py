"""Queries against an installed ``zig`` binary."""

from __future__ import annotations

import json
import subprocess
from pathlib import Path

from py_app_dev.core.logging import logger

from zigsetup.exceptions import ToolchainError


def get_zig_cache_path(zig: str = "zig") -> Path:
    """
    Return the global cache directory reported by ``zig env``.

    Raises:
        ToolchainError: If ``zig`` cannot be run, exits non-zero, or prints
            something other than a JSON object with ``global_cache_dir``.

    """
    command = [zig, "env"]
    logger.debug(f"Running {' '.join(command)}")
    try:
        result = subprocess.run(command, capture_output=True, text=True, check=True)  # noqa: S603
    except FileNotFoundError as exc:
        raise ToolchainError(f"Zig executable '{zig}' not found: {exc}") from exc
    except subprocess.CalledProcessError as exc:
        raise ToolchainError(f"'{' '.join(command)}' failed with exit code {exc.returncode}: {exc.stderr}") from exc

    try:
        env = json.loads(result.stdout)
    except json.JSONDecodeError as exc:
        raise ToolchainError(f"Cannot parse output of '{' '.join(command)}': {exc}") from exc
    if not isinstance(env, dict) or "global_cache_dir" not in env:
        raise ToolchainError(f"'{' '.join(command)}' did not report a global_cache_dir")
    return Path(env["global_cache_dir"])
