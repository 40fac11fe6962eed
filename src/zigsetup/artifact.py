"""Zig tarball naming for a resolved version and host platform."""

from __future__ import annotations

from pathlib import Path

from zigsetup.domain import PlatformArchPair
from zigsetup.exceptions import MissingEnvironmentError, UnsupportedPlatformError
from zigsetup.resolver import VersionResolver

EXTENSION_MAP: dict[str, str] = {
    "linux": ".tar.xz",
    "macos": ".tar.xz",
    "windows": ".zip",
}


class ArtifactNamer:
    """Names the Zig tarball for one host and one version token."""

    def __init__(self, resolver: VersionResolver, host: PlatformArchPair, token: str = "") -> None:
        self.resolver = resolver
        self.host = host
        self.token = token

    def name(self) -> str:
        """Return ``zig-<platform>-<arch>-<version>``."""
        version = self.resolver.resolve(self.token)
        return f"zig-{self.host.platform}-{self.host.arch}-{version}"

    def extension(self) -> str:
        """
        Return the archive extension used for the host platform.

        Raises:
            UnsupportedPlatformError: If no archive format is known for the platform.

        """
        ext = EXTENSION_MAP.get(self.host.platform)
        if ext is None:
            raise UnsupportedPlatformError(f"No archive format known for platform {self.host.platform!r}. Supported: {sorted(EXTENSION_MAP)}")
        return ext

    def tarball_cache_path(self, runner_temp: str | None) -> Path:
        """
        Return where the downloaded tarball is stored below *runner_temp*.

        Raises:
            MissingEnvironmentError: If *runner_temp* is unset or empty.

        """
        if not runner_temp:
            raise MissingEnvironmentError("RUNNER_TEMP is not set; cannot place the downloaded tarball")
        return Path(runner_temp) / self.name()
