# SPDX-FileCopyrightText: 2025 threshold-recovery contributors
# SPDX-License-Identifier: MIT

import json

from threshold_recovery.audit import GENESIS, AuditTrail, secret_digest


def test_record_event_creates_signed_chain(tmp_path):
    trail = AuditTrail(tmp_path)
    assert trail.last_hash() == GENESIS

    first_path = trail.record_event("first", details={"value": 1})
    second_path = trail.record_event("second", details={"value": 2})

    assert first_path.exists()
    assert second_path.exists()
    assert first_path != second_path

    for path in (first_path, second_path):
        assert trail.verify(path)

    chain_state = (tmp_path / "chain.state").read_text().strip()
    first_data = json.loads(first_path.read_text())
    second_data = json.loads(second_path.read_text())
    assert first_data["payload"]["prev_hash"] == GENESIS
    assert chain_state == second_data["chain_hash"]
    assert second_data["payload"]["prev_hash"] == first_data["chain_hash"]


def test_key_is_reused_across_instances(tmp_path):
    path = AuditTrail(tmp_path).record_event("first")
    assert (tmp_path / "signing_key.pem").exists()
    assert AuditTrail(tmp_path).verify(path)


def test_custom_directory_is_created(tmp_path):
    target = tmp_path / "nested" / "audit"
    trail = AuditTrail(target)
    assert target.is_dir()
    assert trail.record_event("test").parent == target


def test_tampered_record_fails(tmp_path):
    trail = AuditTrail(tmp_path)
    path = trail.record_event("reconstruction.completed", details={"votes": 8})
    data = json.loads(path.read_text())
    data["payload"]["details"]["votes"] = 9
    path.write_text(json.dumps(data))
    assert not trail.verify(path)


def test_foreign_key_fails(tmp_path):
    path = AuditTrail(tmp_path / "a").record_event("event")
    assert not AuditTrail(tmp_path / "b").verify(path)
    assert not (tmp_path / "b" / "signing_key.pem").exists()


def test_secret_digest_is_stable():
    assert secret_digest(3) == secret_digest(3)
    assert secret_digest(3) != secret_digest(4)
    assert len(secret_digest(3)) == 64


def test_non_string_signature_fails(tmp_path):
    trail = AuditTrail(tmp_path)
    path = trail.record_event("event")
    data = json.loads(path.read_text())
    data["signature"] = 12345
    path.write_text(json.dumps(data))
    assert not trail.verify(path)


def test_chain_walk(tmp_path):
    trail = AuditTrail(tmp_path)
    assert trail.verify_chain()

    paths = [trail.record_event("event", details={"i": i}) for i in range(3)]
    assert trail.verify_chain()

    paths[1].unlink()
    assert not trail.verify_chain()


def test_chain_walk_rejects_unlinked_record(tmp_path):
    trail = AuditTrail(tmp_path)
    trail.record_event("first")
    (tmp_path / "chain.state").write_text(GENESIS)
    trail.record_event("second")
    # Both records point at GENESIS, so only one is reachable from the head.
    assert not trail.verify_chain()
