"""
Host platform detection using Zig's naming conventions.

MIPS and 64-bit PowerPC hosts report the same ``platform.machine()`` on both
byte orders, so the little-endian token is chosen from ``sys.byteorder``.
Solaris and illumos on x86 report ``i86pc``; their kernels are 64-bit only,
so it maps to ``x86_64``. SPARC hosts are not supported.
"""

from __future__ import annotations

import platform
import re
import sys

from zigsetup.domain import PlatformArchPair
from zigsetup.exceptions import UnsupportedPlatformError

OS_MAP: dict[str, str] = {
    "aix": "aix",
    "android": "android",
    "freebsd": "freebsd",
    "linux": "linux",
    "darwin": "macos",
    "openbsd": "openbsd",
    "sunos": "solaris",
    "win32": "windows",
}

ARCH_MAP: dict[str, str] = {
    "armv7l": "armv7a",
    "armv7a": "armv7a",
    "aarch64": "aarch64",
    "arm64": "aarch64",
    "loongarch64": "loongarch64",
    "mips": "mips",
    "mipsel": "mipsel",
    "mips64": "mips64",
    "mips64el": "mips64el",
    "ppc64": "powerpc64",
    "ppc64le": "powerpc64",
    "riscv64": "riscv64",
    "s390x": "s390x",
    "i86pc": "x86_64",
    "i386": "x86",
    "i686": "x86",
    "x86": "x86",
    "x86_64": "x86_64",
    "amd64": "x86_64",
}

# ppc64le is folded into powerpc64 above and restored by correct_endianness()
LITTLE_ENDIAN_ARCH: dict[str, str] = {
    "powerpc64": "powerpc64le",
    "mips": "mipsel",
    "mips64": "mips64el",
}

_RELEASE_SUFFIX = re.compile(r"\d+$")


def normalize_os(raw_os: str) -> str:
    """Strip the release number some ``sys.platform`` values carry (``freebsd14``, ``sunos5``)."""
    raw_os = raw_os.lower()
    if raw_os in OS_MAP:
        return raw_os
    return _RELEASE_SUFFIX.sub("", raw_os)


def map_os(raw_os: str) -> str:
    zig_os = OS_MAP.get(normalize_os(raw_os))
    if zig_os is None:
        raise UnsupportedPlatformError(f"Unsupported OS: {raw_os!r}. Supported: {sorted(OS_MAP)}")
    return zig_os


def map_arch(raw_arch: str) -> str:
    zig_arch = ARCH_MAP.get(raw_arch.lower())
    if zig_arch is None:
        raise UnsupportedPlatformError(f"Unsupported architecture: {raw_arch!r}. Supported: {sorted(ARCH_MAP)}")
    return zig_arch


def correct_endianness(arch: str, byteorder: str) -> str:
    """Return the little-endian variant of *arch* on a little-endian host."""
    if byteorder == "little":
        return LITTLE_ENDIAN_ARCH.get(arch, arch)
    return arch


def map_platform(raw_os: str, raw_arch: str, byteorder: str) -> PlatformArchPair:
    """
    Map raw host identifiers to Zig's ``(platform, arch)`` tokens.

    Raises:
        UnsupportedPlatformError: If the OS or architecture is not recognized.

    """
    return PlatformArchPair(
        platform=map_os(raw_os),
        arch=correct_endianness(map_arch(raw_arch), byteorder),
    )


def get_current_platform() -> PlatformArchPair:
    """Return the ``(platform, arch)`` pair of the running host."""
    return map_platform(sys.platform, platform.machine(), sys.byteorder)
