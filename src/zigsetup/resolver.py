"""Resolution of symbolic Zig version tokens to concrete versions."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Protocol

from py_app_dev.core.logging import logger

from zigsetup.domain import DEFAULT_INDEX_URL, DEFAULT_MACH_INDEX_URL, VersionIndex
from zigsetup.exceptions import NoQualifyingVersionError, VersionNotFoundError
from zigsetup.manifest import read_minimum_zig_version

MASTER = "master"
LATEST = "latest"
MACH_MARKER = "mach"

_RELEASE_LABEL = re.compile(r"(\d+)\.(\d+)\.(\d+)", re.ASCII)


class IndexSource(Protocol):
    def fetch(self, url: str) -> VersionIndex: ...


def parse_version_label(label: str) -> tuple[int, int, int] | None:
    """Return ``(major, minor, patch)`` for a plain release label, else ``None``."""
    match = _RELEASE_LABEL.fullmatch(label)
    if match is None:
        return None
    major, minor, patch = (int(part) for part in match.groups())
    return major, minor, patch


def latest_version(index: VersionIndex) -> str:
    """
    Return the label of the newest tagged release in *index*.

    Only labels made of three dot-separated integers take part; ``master``
    and anything else are skipped. Comparison is numeric, so ``0.11.0`` beats
    ``0.9.2``.

    Raises:
        NoQualifyingVersionError: If no label qualifies.

    """
    releases = {label: key for label in index if (key := parse_version_label(label)) is not None}
    if not releases:
        raise NoQualifyingVersionError("No tagged release found in the Zig version index")
    return max(releases, key=releases.__getitem__)


class VersionResolver:
    """
    Turns a version token into one concrete Zig version.

    The first successful resolution is kept on the instance and returned by
    every later call without further I/O, whatever token is passed.
    """

    def __init__(
        self,
        source: IndexSource,
        manifest_path: Path,
        index_url: str = DEFAULT_INDEX_URL,
        mach_index_url: str = DEFAULT_MACH_INDEX_URL,
    ) -> None:
        self.source = source
        self.manifest_path = manifest_path
        self.index_url = index_url
        self.mach_index_url = mach_index_url
        self._resolved: str | None = None

    @property
    def resolved(self) -> str | None:
        return self._resolved

    def reset(self) -> None:
        self._resolved = None

    def resolve(self, token: str) -> str:
        """
        Resolve *token* to a concrete version.

        Raises:
            VersionNotFoundError: If ``master`` or a Mach name is missing from its index.
            NoQualifyingVersionError: If ``latest`` finds no tagged release.

        """
        if self._resolved is not None:
            return self._resolved

        effective = token or self._manifest_token()
        self._resolved = self._resolve_effective(effective)
        logger.info(f"Resolved Zig version '{effective}' to {self._resolved}")
        return self._resolved

    def _manifest_token(self) -> str:
        logger.debug(f"No explicit version given, looking for {self.manifest_path}")
        return read_minimum_zig_version(self.manifest_path) or LATEST

    def _resolve_effective(self, token: str) -> str:
        if token == MASTER:
            return self._lookup(self.index_url, MASTER)
        if token == LATEST:
            return latest_version(self.source.fetch(self.index_url))
        if MACH_MARKER in token:
            return self._lookup(self.mach_index_url, token)
        return token

    def _lookup(self, url: str, label: str) -> str:
        release = self.source.fetch(url).get(label)
        if release is None:
            raise VersionNotFoundError(f"Version '{label}' not found in {url}")
        if not release.version:
            raise VersionNotFoundError(f"Version '{label}' has no version field in {url}")
        return release.version
