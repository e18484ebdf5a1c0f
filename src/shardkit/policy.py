"""Centralised runtime policy for the sharding tools.

The policy gathers defaults and limits shared by the CLI and the file layer.
Every value can be overridden through a ``SHARDKIT_*`` environment variable,
so deployments can tighten limits without code changes. Malformed overrides
are ignored and the default is used instead.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return default


def _load_str(name: str, default: str) -> str:
    value = os.environ.get(name, "").strip()
    return value or default


@dataclass(frozen=True)
class ShardPolicy:
    """Holds runtime tunables for splitting and combining files."""

    default_parts: int = 5
    default_threshold: int = 3
    max_secret_size_mb: int = 512
    min_free_space_mb: int = 16
    headroom_mb: int = 4
    shard_prefix: str = "shards"
    audit_enabled: bool = True


def load_policy() -> ShardPolicy:
    """Load the policy considering environment overrides."""

    return ShardPolicy(
        default_parts=_load_int("SHARDKIT_DEFAULT_PARTS", 5),
        default_threshold=_load_int("SHARDKIT_DEFAULT_THRESHOLD", 3),
        max_secret_size_mb=_load_int("SHARDKIT_MAX_SECRET_MB", 512),
        min_free_space_mb=_load_int("SHARDKIT_MIN_FREE_MB", 16),
        headroom_mb=_load_int("SHARDKIT_HEADROOM_MB", 4),
        shard_prefix=_load_str("SHARDKIT_SHARD_PREFIX", "shards"),
        audit_enabled=_load_bool("SHARDKIT_AUDIT", True),
    )


policy = load_policy()


__all__ = ["ShardPolicy", "policy", "load_policy"]
