from zigsetup.domain.models import (
    DEFAULT_INDEX_URL,
    DEFAULT_MACH_INDEX_URL,
    PlatformArchPair,
    SetupConfig,
    SetupPlan,
    VersionIndex,
    ZigRelease,
)

__all__ = [
    "DEFAULT_INDEX_URL",
    "DEFAULT_MACH_INDEX_URL",
    "PlatformArchPair",
    "SetupConfig",
    "SetupPlan",
    "VersionIndex",
    "ZigRelease",
]
