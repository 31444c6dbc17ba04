"""Tamper-evident audit records with Ed25519 signatures and hash chaining.

Each event is written to its own JSON file. The payload includes the chain
hash of the previous record, and the record's own chain hash covers the
payload and its signature. :meth:`AuditTrail.verify` detects an edited
record; :meth:`AuditTrail.verify_chain` also detects a deleted one.
"""
from __future__ import annotations

import hashlib
import json
import os
import time
import uuid
from pathlib import Path
from typing import Any, Dict, Optional

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

GENESIS = "GENESIS"


def secret_digest(secret: int) -> str:
    """Return a SHA3-256 fingerprint of *secret* suitable for logs."""

    return hashlib.sha3_256(str(secret).encode("ascii")).hexdigest()


def _canonical(payload: Dict[str, Any]) -> bytes:
    return json.dumps(payload, ensure_ascii=False, sort_keys=True).encode("utf-8")


class AuditTrail:
    """Append-only audit directory holding a signing key and chain state."""

    def __init__(self, directory: os.PathLike[str] | str) -> None:
        self.directory = Path(directory).expanduser()
        self.directory.mkdir(parents=True, exist_ok=True)
        self.key_path = self.directory / "signing_key.pem"
        self.chain_state_path = self.directory / "chain.state"
        self._private_key: Optional[Ed25519PrivateKey] = None

    def _load_private_key(self) -> Ed25519PrivateKey:
        if self._private_key is not None:
            return self._private_key
        if self.key_path.exists():
            key = serialization.load_pem_private_key(self.key_path.read_bytes(), password=None)
            if not isinstance(key, Ed25519PrivateKey):
                raise TypeError(f"{self.key_path} does not hold an Ed25519 key")
        else:
            key = Ed25519PrivateKey.generate()
            self.key_path.write_bytes(
                key.private_bytes(
                    encoding=serialization.Encoding.PEM,
                    format=serialization.PrivateFormat.PKCS8,
                    encryption_algorithm=serialization.NoEncryption(),
                )
            )
        self._private_key = key
        return key

    def last_hash(self) -> str:
        try:
            return self.chain_state_path.read_text().strip()
        except FileNotFoundError:
            return GENESIS

    def record_event(self, event: str, *, details: Dict[str, Any] | None = None) -> Path:
        timestamp = int(time.time())
        payload = {
            "event": event,
            "details": details or {},
            "timestamp": timestamp,
            "prev_hash": self.last_hash(),
        }
        message = _canonical(payload)
        signature = self._load_private_key().sign(message)
        chain_hash = hashlib.sha3_512(message + signature).hexdigest()
        entry = {
            "payload": payload,
            "signature": signature.hex(),
            "chain_hash": chain_hash,
        }
        file_path = self.directory / f"audit_{timestamp}_{uuid.uuid4().hex}.json"
        file_path.write_text(json.dumps(entry, ensure_ascii=False, indent=2))
        self.chain_state_path.write_text(chain_hash)
        return file_path

    def verify(self, path: os.PathLike[str] | str) -> bool:
        """Check the signature and chain hash of the record at *path*."""

        if not self.key_path.exists():
            return False
        data = json.loads(Path(path).read_text())
        if not isinstance(data, dict) or "payload" not in data:
            return False
        message = _canonical(data["payload"])
        signature_hex = data.get("signature")
        if not isinstance(signature_hex, str):
            return False
        try:
            signature = bytes.fromhex(signature_hex)
        except ValueError:
            return False
        public_key = self._load_private_key().public_key()
        try:
            public_key.verify(signature, message)
        except InvalidSignature:
            return False
        expected = hashlib.sha3_512(message + signature).hexdigest()
        return expected == data.get("chain_hash")

    def verify_chain(self) -> bool:
        """Walk the chain from the stored head back to :data:`GENESIS`.

        Every record in the directory must be reached exactly once and pass
        :meth:`verify`, so a deleted, edited or foreign record fails the walk.
        """

        by_hash: Dict[str, Dict[str, Any]] = {}
        for path in self.directory.glob("audit_*.json"):
            if not self.verify(path):
                return False
            data = json.loads(path.read_text())
            by_hash[data["chain_hash"]] = data

        current = self.last_hash()
        seen = 0
        while current != GENESIS:
            record = by_hash.get(current)
            if record is None or seen >= len(by_hash):
                return False
            seen += 1
            current = record["payload"].get("prev_hash")
        return seen == len(by_hash)


__all__ = ["AuditTrail", "secret_digest", "GENESIS"]
