"""Tests for minimum Zig version extraction from build.zig.zon."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from zigsetup.manifest import extract_minimum_zig_version, read_minimum_zig_version


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ('.minimum_zig_version = "0.11.0";', "0.11.0"),
        ('minimum_zig_version = "0.12.0";', "0.12.0"),
        ('\n      .    minimum_zig_version    =    "0.13.0"   ;\n      ', "0.13.0"),
        ('.minimum_zig_version = "0.15.0-dev.345+ec2888858",', "0.15.0-dev.345+ec2888858"),
        ('.minimum_zig_version="0.12.1"', "0.12.1"),
    ],
    ids=["period-prefix", "no-prefix", "whitespace", "dev-version", "no-spaces"],
)
def test_extract_minimum_zig_version(text: str, expected: str) -> None:
    assert extract_minimum_zig_version(text) == expected


def test_extract_from_full_manifest() -> None:
    text = """.{
    .name = "example",
    .version = "0.0.1",
    .minimum_zig_version = "0.14.0",
    .dependencies = .{},
    .paths = .{""},
}
"""
    assert extract_minimum_zig_version(text) == "0.14.0"


@pytest.mark.parametrize(
    "text",
    [
        "",
        '.name = "example",',
        "minimum_zig_version = 0.11.0",
    ],
)
def test_extract_not_found(text: str) -> None:
    assert extract_minimum_zig_version(text) is None


def test_read_manifest(tmp_path: Path) -> None:
    manifest = tmp_path / "build.zig.zon"
    manifest.write_text('.{ .minimum_zig_version = "0.13.0" }', encoding="utf-8")

    assert read_minimum_zig_version(manifest) == "0.13.0"


def test_read_missing_manifest(tmp_path: Path) -> None:
    assert read_minimum_zig_version(tmp_path / "build.zig.zon") is None


def test_read_unreadable_manifest(tmp_path: Path) -> None:
    manifest = tmp_path / "build.zig.zon"
    manifest.mkdir()

    assert read_minimum_zig_version(manifest) is None


def test_read_manifest_without_constraint(tmp_path: Path) -> None:
    manifest = tmp_path / "build.zig.zon"
    manifest.write_text('.{ .name = "example" }', encoding="utf-8")

    assert read_minimum_zig_version(manifest) is None


def test_read_manifest_with_empty_constraint(tmp_path: Path) -> None:
    manifest = tmp_path / "build.zig.zon"
    manifest.write_text('.{ .minimum_zig_version = "", }', encoding="utf-8")

    with patch("zigsetup.manifest.logger") as mock_logger:
        assert read_minimum_zig_version(manifest) is None

    mock_logger.info.assert_called_once_with("Failed to find minimum_zig_version in build.zig.zon (using latest)")
