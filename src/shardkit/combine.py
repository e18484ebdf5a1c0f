"""Recover a secret file from a directory of share files."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from shardkit import shamir
from shardkit.audit import record_event
from shardkit.resources import ensure_combine_capacity

_logger = logging.getLogger(__name__)


def combine_files(shard_paths: Iterable[str | Path], output_path: str | Path) -> Path:
    """Combine the shares stored at *shard_paths* and write the secret to *output_path*."""
    paths = [Path(p) for p in shard_paths]
    parts = [p.read_bytes() for p in paths]

    secret = shamir.combine(parts)

    output = Path(output_path)
    ensure_combine_capacity(str(paths[0]), str(output))
    output.write_bytes(secret)

    _logger.info("combined %d shards into %s", len(parts), output)
    record_event(
        "shard.combine",
        details={
            "share_count": len(parts),
            "secret_length": len(secret),
            "output_path": str(output.resolve()),
        },
    )
    return output


def collect_shard_paths(shards_dir: str | Path) -> list[Path]:
    """Return every regular file directly inside *shards_dir*, sorted by name."""
    return sorted(entry for entry in Path(shards_dir).iterdir() if entry.is_file())


def combine_secret(shards_dir: str | Path, recovered_secret_path: str | Path) -> Path:
    """Combine all shards found in *shards_dir* into *recovered_secret_path*."""
    shard_paths = collect_shard_paths(shards_dir)
    _logger.debug("found %d candidate shard files in %s", len(shard_paths), shards_dir)
    return combine_files(shard_paths, recovered_secret_path)


__all__ = ["collect_shard_paths", "combine_files", "combine_secret"]
