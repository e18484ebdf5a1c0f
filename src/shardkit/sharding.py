"""Split a secret file into share files stored in a directory."""

from __future__ import annotations

import logging
from pathlib import Path

from shardkit import shamir
from shardkit.audit import record_event
from shardkit.policy import policy
from shardkit.polynomial import RandomSource
from shardkit.resources import ensure_shard_capacity

_logger = logging.getLogger(__name__)


def shard_file(
    path: str | Path,
    parts: int,
    threshold: int,
    *,
    rng: RandomSource | None = None,
) -> list[bytes]:
    """Read *path* and return its shares without touching the disk further."""
    data = Path(path).read_bytes()
    return shamir.split(data, parts, threshold, rng=rng)


def shard_secret(
    secret_path: str | Path,
    shards_path: str | Path,
    parts: int,
    threshold: int,
    *,
    rng: RandomSource | None = None,
) -> list[Path]:
    """Shard the file at *secret_path* into *parts* files under *shards_path*.

    The directory is created when missing. Share ``k`` of the split is written
    to ``<shards_path>/<prefix>_<k>``; the file name carries no meaning, the
    share's x-coordinate lives in its last byte.
    """
    shards_dir = Path(shards_path)
    ensure_shard_capacity(str(secret_path), str(shards_dir), parts)

    shares = shard_file(secret_path, parts, threshold, rng=rng)

    shards_dir.mkdir(parents=True, exist_ok=True)
    written: list[Path] = []
    for index, share in enumerate(shares):
        shard_path = shards_dir / f"{policy.shard_prefix}_{index}"
        shard_path.write_bytes(share)
        written.append(shard_path)

    _logger.info("wrote %d shards to %s", len(written), shards_dir)
    record_event(
        "shard.split",
        details={
            "parts": parts,
            "threshold": threshold,
            "secret_length": len(shares[0]) - 1,
            "shard_count": len(written),
            "shards_dir": str(shards_dir.resolve()),
        },
    )
    return written


__all__ = ["shard_file", "shard_secret"]
