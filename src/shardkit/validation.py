"""Input validation for the file-level sharding commands."""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Iterable

from shardkit.policy import policy


@dataclass
class ValidationIssue:
    field: str
    message: str


def validate_secret_path(
    path: str,
    *,
    max_size_mb: int | None = None,
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    normalized = os.path.expanduser(path or "").strip()
    if not normalized:
        issues.append(ValidationIssue("secret_path", "Secret path is required."))
        return issues
    if not os.path.exists(normalized):
        issues.append(ValidationIssue("secret_path", "Secret file not found."))
        return issues
    if not os.path.isfile(normalized):
        issues.append(ValidationIssue("secret_path", "Secret path must be a file, not a directory."))
        return issues
    size_bytes = os.path.getsize(normalized)
    if size_bytes == 0:
        issues.append(ValidationIssue("secret_path", "Secret file is empty."))
    limit_mb = max_size_mb if max_size_mb is not None else policy.max_secret_size_mb
    if size_bytes > limit_mb * 1024 * 1024:
        issues.append(
            ValidationIssue(
                "secret_path",
                f"Secret file exceeds the {limit_mb} MB limit."
            )
        )
    return issues


def validate_shards_dir(path: str, *, must_exist: bool = True) -> list[ValidationIssue]:
    """Check a shard directory; when *must_exist* is false it may be created later."""
    issues: list[ValidationIssue] = []
    normalized = os.path.expanduser(path or "").strip()
    if not normalized:
        issues.append(ValidationIssue("shards_dir", "Shards directory is required."))
        return issues
    if os.path.exists(normalized):
        if not os.path.isdir(normalized):
            issues.append(ValidationIssue("shards_dir", "Shards path exists and is not a directory."))
        elif not must_exist and not os.access(normalized, os.W_OK):
            issues.append(ValidationIssue("shards_dir", "No write permission for the shards directory."))
    elif must_exist:
        issues.append(ValidationIssue("shards_dir", "Shards directory not found."))
    return issues


def validate_output_path(
    path: str,
    *,
    source_path: str | None = None,
) -> list[ValidationIssue]:
    issues: list[ValidationIssue] = []
    normalized = os.path.expanduser(path or "").strip()
    if not normalized:
        issues.append(ValidationIssue("output_path", "Output path is required."))
        return issues

    if os.path.isdir(normalized):
        issues.append(ValidationIssue("output_path", "Output path must be a file, not a directory."))
        return issues

    directory = os.path.dirname(normalized) or os.getcwd()
    if not os.path.isdir(directory):
        issues.append(ValidationIssue("output_path", "Output directory not found."))
        return issues
    if not os.access(directory, os.W_OK):
        issues.append(ValidationIssue("output_path", "No write permission for the output directory."))

    if source_path:
        source_normalized = os.path.realpath(os.path.expanduser(source_path.strip()))
        if os.path.realpath(normalized).startswith(source_normalized + os.sep):
            issues.append(
                ValidationIssue(
                    "output_path",
                    "Output path is inside the shards directory. Choose another location."
                )
            )

    return issues


def collect_issues(*sources: Iterable[ValidationIssue]) -> list[ValidationIssue]:
    aggregated: list[ValidationIssue] = []
    for source in sources:
        aggregated.extend(source)
    return aggregated


__all__ = [
    "ValidationIssue",
    "collect_issues",
    "validate_output_path",
    "validate_secret_path",
    "validate_shards_dir",
]
