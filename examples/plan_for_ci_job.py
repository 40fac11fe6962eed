"""Derive the Zig tarball name and cache key prefix for the current CI job."""

import os
from pathlib import Path

from zigsetup.domain import SetupConfig
from zigsetup.zigsetup import ZigSetup

setup = ZigSetup(
    SetupConfig(
        version=os.environ.get("INPUT_VERSION", ""),
        project_dir=str(Path.cwd()),
        job=os.environ.get("GITHUB_JOB"),
        runner_temp=os.environ.get("RUNNER_TEMP"),
    )
)

plan = setup.plan()
print(f"Zig {plan.version} for {plan.platform}/{plan.arch}: {plan.artifact_name}{plan.extension or ''}")
print(f"Cache key prefix: {plan.cache_prefix}")
