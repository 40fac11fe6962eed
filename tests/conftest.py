"""Shared pytest fixtures for zigsetup tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from zigsetup.domain import DEFAULT_INDEX_URL, DEFAULT_MACH_INDEX_URL, VersionIndex, ZigRelease
from zigsetup.resolver import VersionResolver

ZIG_INDEX: VersionIndex = {
    "master": ZigRelease(version="0.14.0-dev.1911+3bf89f55c", date="2024-10-16"),
    "0.13.0": ZigRelease(date="2024-06-07"),
    "0.11.0": ZigRelease(date="2023-08-04"),
    "0.10.5": ZigRelease(date="2022-12-01"),
    "0.9.2": ZigRelease(date="2022-02-14"),
}

MACH_INDEX: VersionIndex = {
    "mach-latest": ZigRelease(version="0.14.0-dev.1911+3bf89f55c"),
    "2024.5.0-mach": ZigRelease(version="0.13.0-dev.351+64ef45eb0"),
}


@dataclass
class FakeIndexSource:
    """In-memory index source recording every fetched URL."""

    indices: dict[str, VersionIndex]
    fetched: list[str] = field(default_factory=list)

    def fetch(self, url: str) -> VersionIndex:
        self.fetched.append(url)
        return self.indices[url]


@pytest.fixture
def index_source() -> FakeIndexSource:
    return FakeIndexSource(indices={DEFAULT_INDEX_URL: dict(ZIG_INDEX), DEFAULT_MACH_INDEX_URL: dict(MACH_INDEX)})


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """An empty project directory without ``build.zig.zon``."""
    project = tmp_path / "project"
    project.mkdir()
    return project


@pytest.fixture
def resolver(index_source: FakeIndexSource, project_dir: Path) -> VersionResolver:
    return VersionResolver(index_source, manifest_path=project_dir / "build.zig.zon")
