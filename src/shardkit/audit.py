"""Offline audit trail with Ed25519 signatures and hash chaining.

Each split or combine performed through the file layer appends one JSON
record. Records carry only metadata (counts, lengths, paths); secret and
share bytes are never written here.
"""
from __future__ import annotations

import hashlib
import json
import logging
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from shardkit.policy import policy

GENESIS = "GENESIS"

_logger = logging.getLogger(__name__)


class AuditError(RuntimeError):
    """Raised when an audit record cannot be persisted."""


def audit_dir() -> Path:
    """Return the directory where audit records are stored.

    ``SHARDKIT_AUDIT_DIR`` overrides the default of ``~/.shardkit_audit``.
    The variable is read on every call so tests can redirect it.
    """

    override = os.environ.get("SHARDKIT_AUDIT_DIR")
    if override:
        return Path(override).expanduser()
    return Path.home() / ".shardkit_audit"


def _key_path() -> Path:
    return audit_dir() / "signing_key.pem"


def _chain_state_path() -> Path:
    return audit_dir() / "chain.state"


def _read_private_key() -> Ed25519PrivateKey | None:
    try:
        data = _key_path().read_bytes()
    except FileNotFoundError:
        return None
    return serialization.load_pem_private_key(data, password=None)


def _load_private_key() -> Ed25519PrivateKey:
    existing = _read_private_key()
    if existing is not None:
        return existing
    private_key = Ed25519PrivateKey.generate()
    pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    # created owner-only, no chmod window
    fd = os.open(_key_path(), os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o600)
    with os.fdopen(fd, "wb") as handle:
        handle.write(pem)
    return private_key


def _load_prev_hash() -> str:
    try:
        return _chain_state_path().read_text().strip()
    except FileNotFoundError:
        return GENESIS


def _store_chain_hash(hash_hex: str) -> None:
    _chain_state_path().write_text(hash_hex)


def record_event(event: str, *, details: Dict[str, Any] | None = None) -> Path | None:
    """Append a signed record for *event*; returns its path, or ``None`` if disabled."""
    if not policy.audit_enabled:
        return None

    directory = audit_dir()
    try:
        directory.mkdir(parents=True, exist_ok=True)
        timestamp = int(time.time())
        payload = {
            "event": event,
            "details": details or {},
            "timestamp": timestamp,
            "prev_hash": _load_prev_hash(),
        }
        message = json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")
        signature = _load_private_key().sign(message)
        chain_hash = hashlib.sha3_512(message + signature).hexdigest()
        entry = {
            "payload": payload,
            "signature": signature.hex(),
            "chain_hash": chain_hash,
        }
        file_path = directory / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
        file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
        _store_chain_hash(chain_hash)
    except OSError as exc:
        raise AuditError(f"cannot write audit record to {directory}: {exc}") from exc

    _logger.debug("audit event %s recorded in %s", event, file_path.name)
    return file_path


def verify_log(path: os.PathLike[str] | str) -> bool:
    """Check the signature and chain hash of the record stored at *path*.

    Verification never creates a signing key; it returns ``False`` when the
    audit directory holds none.
    """
    data = json.loads(Path(path).read_text())
    payload = json.dumps(data["payload"], ensure_ascii=False, sort_keys=True).encode("utf-8")
    signature_hex = data.get("signature")
    signature = bytes.fromhex(signature_hex) if signature_hex else b""
    private_key = _read_private_key()
    if private_key is None:
        return False
    public_key = private_key.public_key()
    try:
        public_key.verify(signature, payload)
    except InvalidSignature:
        return False
    expected_chain_hash = hashlib.sha3_512(payload + signature).hexdigest()
    return expected_chain_hash == data.get("chain_hash")


__all__ = ["AuditError", "GENESIS", "audit_dir", "record_event", "verify_log"]
