"""Resolve a Mach nominated Zig version to the Zig build it pins."""

from pathlib import Path

from zigsetup.index import VersionSource
from zigsetup.manifest import MANIFEST_FILE
from zigsetup.resolver import VersionResolver

resolver = VersionResolver(VersionSource(), manifest_path=Path.cwd() / MANIFEST_FILE)
print(resolver.resolve("mach-latest"))
