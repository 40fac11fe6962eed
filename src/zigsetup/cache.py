"""Cache key prefixes for the Zig build cache."""

from __future__ import annotations

import re

from zigsetup.exceptions import MissingEnvironmentError

CACHE_KEY_PREFIX = "setup-zig-cache-"

_NON_WORD_RUN = re.compile(r"\W+", re.ASCII)


def sanitize_job_name(job: str) -> str:
    """Replace every run of non-word characters in *job* with a single underscore."""
    return _NON_WORD_RUN.sub("_", job)


def cache_prefix(job: str | None, artifact_name: str) -> str:
    """
    Return the cache key prefix for *job* and *artifact_name*.

    The trailing hyphen is part of the prefix: the cache store matches keys
    starting with it, so later runs of the same job reuse the newest entry.

    Raises:
        MissingEnvironmentError: If *job* is unset or empty.

    """
    if not job:
        raise MissingEnvironmentError("GITHUB_JOB is not set; cannot derive a cache key")
    return f"{CACHE_KEY_PREFIX}{sanitize_job_name(job)}-{artifact_name}-"
