"""Disk space checks performed before shards or secrets are written."""

from __future__ import annotations

from dataclasses import dataclass

import os
import shutil

from shardkit.policy import policy


class ResourceError(RuntimeError):
    """Raised when there is not enough free space to complete an operation."""


@dataclass(frozen=True)
class DiskCapacity:
    total: int
    used: int
    free: int


def _resolve_directory(path: str) -> str:
    absolute = os.path.abspath(path)
    # The target may not exist yet; walk up to the nearest existing directory.
    while not os.path.isdir(absolute):
        parent = os.path.dirname(absolute)
        if parent == absolute:
            break
        absolute = parent
    return absolute


def _capacity_for(path: str) -> DiskCapacity:
    usage = shutil.disk_usage(path)
    return DiskCapacity(total=usage.total, used=usage.used, free=usage.free)


def _require_bytes(directory: str, required_bytes: int) -> None:
    capacity = _capacity_for(directory)
    headroom = policy.headroom_mb * 1024 * 1024
    minimum_free = policy.min_free_space_mb * 1024 * 1024
    threshold = max(required_bytes + headroom, minimum_free)
    if capacity.free < threshold:
        required_mb = threshold / (1024 * 1024)
        free_mb = capacity.free / (1024 * 1024)
        raise ResourceError(
            "Not enough free space: at least "
            f"{required_mb:.1f} MB required, {free_mb:.1f} MB available."
        )


def ensure_shard_capacity(secret_path: str, shards_dir: str, parts: int) -> None:
    """Ensure *shards_dir* can hold *parts* shares of the file at *secret_path*."""

    size = os.path.getsize(secret_path)
    # Every share carries one extra byte for its x-coordinate.
    required = (size + 1) * parts
    _require_bytes(_resolve_directory(shards_dir), required)


def ensure_combine_capacity(shard_path: str, output_path: str) -> None:
    """Ensure the secret recovered from shares like *shard_path* fits at *output_path*."""

    size = os.path.getsize(shard_path)
    required = max(size - 1, 0)
    _require_bytes(_resolve_directory(output_path), required)


__all__ = [
    "DiskCapacity",
    "ResourceError",
    "ensure_combine_capacity",
    "ensure_shard_capacity",
]
