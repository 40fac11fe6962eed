from pathlib import Path

from py_app_dev.core.logging import logger

from zigsetup.artifact import ArtifactNamer
from zigsetup.cache import cache_prefix
from zigsetup.domain import PlatformArchPair, SetupConfig, SetupPlan
from zigsetup.exceptions import MissingEnvironmentError, UnsupportedPlatformError
from zigsetup.index import VersionSource
from zigsetup.manifest import MANIFEST_FILE
from zigsetup.platform import get_current_platform
from zigsetup.resolver import IndexSource, VersionResolver


class ZigSetup:
    """Derives the Zig version, tarball name and cache keys for one invocation."""

    def __init__(
        self,
        config: SetupConfig,
        source: IndexSource | None = None,
        host: PlatformArchPair | None = None,
    ) -> None:
        """
        Initialize the setup for one invocation.

        Args:
            config: Invocation inputs.
            source: Version index source; defaults to fetching over HTTP.
            host: Target platform; defaults to the running host.

        """
        self.config = config
        self.resolver = VersionResolver(
            source or VersionSource(),
            manifest_path=Path(config.project_dir) / MANIFEST_FILE,
            index_url=config.index_url,
            mach_index_url=config.mach_index_url,
        )
        self.host = host or get_current_platform()
        self.namer = ArtifactNamer(self.resolver, self.host, config.version)

    def resolve_version(self) -> str:
        return self.resolver.resolve(self.config.version)

    def artifact_name(self) -> str:
        return self.namer.name()

    def extension(self) -> str:
        return self.namer.extension()

    def cache_prefix(self) -> str:
        return cache_prefix(self.config.job, self.namer.name())

    def tarball_cache_path(self) -> Path:
        return self.namer.tarball_cache_path(self.config.runner_temp)

    def plan(self) -> SetupPlan:
        """
        Collect every derived value into a plan.

        Values depending on an absent environment input or on an unknown
        archive format are left empty and a warning is logged; version
        resolution errors propagate.

        Returns:
            The setup plan.

        """
        plan = SetupPlan(
            version=self.resolve_version(),
            platform=self.host.platform,
            arch=self.host.arch,
            artifact_name=self.artifact_name(),
        )
        try:
            plan.extension = self.extension()
        except UnsupportedPlatformError as e:
            logger.warning(f"{e}")
        try:
            plan.cache_prefix = self.cache_prefix()
        except MissingEnvironmentError as e:
            logger.warning(f"{e}")
        try:
            plan.tarball_cache_path = str(self.tarball_cache_path())
        except MissingEnvironmentError as e:
            logger.warning(f"{e}")
        return plan
