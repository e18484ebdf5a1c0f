"""Test configuration helpers."""
from __future__ import annotations

import random

import pytest
from hypothesis import HealthCheck, settings

# _isolated_audit_dir is autouse and function scoped; it only sets an env var.
settings.register_profile(
    "shardkit",
    deadline=None,
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("shardkit")


@pytest.fixture(autouse=True)
def _isolated_audit_dir(tmp_path, monkeypatch):
    """Keep audit records and the signing key out of the real home directory."""
    audit_dir = tmp_path / "audit"
    monkeypatch.setenv("SHARDKIT_AUDIT_DIR", str(audit_dir))
    yield audit_dir


@pytest.fixture
def rng():
    return random.Random(1234)
