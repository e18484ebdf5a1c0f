import importlib


def test_policy_env_overrides(monkeypatch):
    monkeypatch.setenv("SHARDKIT_DEFAULT_PARTS", "7")
    monkeypatch.setenv("SHARDKIT_DEFAULT_THRESHOLD", "4")
    monkeypatch.setenv("SHARDKIT_MAX_SECRET_MB", "1024")
    monkeypatch.setenv("SHARDKIT_MIN_FREE_MB", "128")
    monkeypatch.setenv("SHARDKIT_HEADROOM_MB", "32")
    monkeypatch.setenv("SHARDKIT_SHARD_PREFIX", "part")
    monkeypatch.setenv("SHARDKIT_AUDIT", "off")

    policy_module = importlib.import_module("shardkit.policy")
    reloaded = importlib.reload(policy_module)

    try:
        policy = reloaded.policy
        assert policy.default_parts == 7
        assert policy.default_threshold == 4
        assert policy.max_secret_size_mb == 1024
        assert policy.min_free_space_mb == 128
        assert policy.headroom_mb == 32
        assert policy.shard_prefix == "part"
        assert policy.audit_enabled is False
    finally:
        for name in (
            "SHARDKIT_DEFAULT_PARTS",
            "SHARDKIT_DEFAULT_THRESHOLD",
            "SHARDKIT_MAX_SECRET_MB",
            "SHARDKIT_MIN_FREE_MB",
            "SHARDKIT_HEADROOM_MB",
            "SHARDKIT_SHARD_PREFIX",
            "SHARDKIT_AUDIT",
        ):
            monkeypatch.delenv(name, raising=False)
        importlib.reload(policy_module)


def test_malformed_values_fall_back(monkeypatch):
    monkeypatch.setenv("SHARDKIT_DEFAULT_PARTS", "many")
    monkeypatch.setenv("SHARDKIT_AUDIT", "maybe")
    monkeypatch.setenv("SHARDKIT_SHARD_PREFIX", "   ")

    from shardkit.policy import ShardPolicy, load_policy

    loaded = load_policy()
    defaults = ShardPolicy()
    assert loaded.default_parts == defaults.default_parts
    assert loaded.audit_enabled is defaults.audit_enabled
    assert loaded.shard_prefix == "shards"
