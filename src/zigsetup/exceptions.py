"""Errors raised while resolving and naming a Zig toolchain."""

from py_app_dev.core.exceptions import UserNotificationException


class ZigSetupError(UserNotificationException):
    """Base class for all errors reported to the user."""


class IndexFetchError(ZigSetupError):
    """Raised when a version index cannot be fetched or decoded."""


class VersionNotFoundError(ZigSetupError, LookupError):
    """Raised when a symbolic version label is missing from its index."""


class NoQualifyingVersionError(ZigSetupError, LookupError):
    """Raised when an index has no ``major.minor.patch`` release to pick from."""


class UnsupportedPlatformError(ZigSetupError, ValueError):
    """Raised when the host OS or architecture has no Zig counterpart."""


class MissingEnvironmentError(ZigSetupError, ValueError):
    """Raised when a required environment input is unset or empty."""


class ToolchainError(ZigSetupError):
    """Raised when querying the installed ``zig`` binary fails."""
