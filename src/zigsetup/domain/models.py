"""Domain models for version indices, host platforms and setup plans."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from mashumaro.config import BaseConfig
from mashumaro.mixins.json import DataClassJSONMixin

DEFAULT_INDEX_URL = "https://ziglang.org/download/index.json"
DEFAULT_MACH_INDEX_URL = "https://pkg.machengine.org/zig/index.json"


@dataclass
class ZigSetupJsonMixin(DataClassJSONMixin):
    """Shared mixin providing mashumaro config and JSON file I/O."""

    class Config(BaseConfig):
        omit_none = True

    @classmethod
    def from_json_file(cls, file_path: Path) -> Self:
        return cls.from_dict(json.loads(file_path.read_text()))

    def to_json_string(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    def to_json_file(self, file_path: Path) -> None:
        file_path.write_text(self.to_json_string())


@dataclass
class ZigRelease(ZigSetupJsonMixin):
    """
    A single entry of a Zig version index.

    Tagged releases in the general index carry no ``version`` field (their
    label is the version); ``master`` and the Mach nominated entries do.
    Per-host tarball entries such as ``x86_64-linux`` are ignored.
    """

    version: str | None = None
    date: str | None = None
    docs: str | None = None
    notes: str | None = None


VersionIndex = dict[str, ZigRelease]


@dataclass(frozen=True)
class PlatformArchPair:
    """Zig's canonical platform and architecture tokens for a host."""

    platform: str
    arch: str


@dataclass
class SetupConfig(ZigSetupJsonMixin):
    """Inputs of one setup invocation."""

    #: Version token: explicit version, ``latest``, ``master``, a Mach name or empty
    version: str = ""
    #: Directory holding ``build.zig.zon``
    project_dir: str = "."
    index_url: str = DEFAULT_INDEX_URL
    mach_index_url: str = DEFAULT_MACH_INDEX_URL
    #: CI job name used to namespace the cache
    job: str | None = None
    #: Directory where downloaded tarballs are stored
    runner_temp: str | None = None


@dataclass
class SetupPlan(ZigSetupJsonMixin):
    """Every value derived for one setup invocation."""

    version: str
    platform: str
    arch: str
    artifact_name: str
    extension: str | None = None
    cache_prefix: str | None = None
    tarball_cache_path: str | None = None
