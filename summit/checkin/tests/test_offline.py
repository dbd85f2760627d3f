import json
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
import requests

from checkin.offline import (
    ConnectivityMonitor, OfflineQueue, OfflineRecord, VerificationClient,
    HttpVerificationTransport, TransportError, PENDING_SYNC,
)

FIXED_NOW = datetime(2024, 12, 15, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def queue(tmp_path):
    return OfflineQueue(tmp_path / "device", security_id="42", badge_number="SEC-001", clock=lambda: FIXED_NOW)


@pytest.fixture
def offline_client(queue):
    transport = MagicMock(spec=HttpVerificationTransport)
    monitor = ConnectivityMonitor(online=False)
    return VerificationClient(queue=queue, monitor=monitor, transport=transport)


# ========= connectivity =========
def test_monitor_changes_only_on_events():
    seen = []
    monitor = ConnectivityMonitor()
    monitor.add_listener(seen.append)

    assert monitor.is_online is True
    assert monitor.handle_event("online") is False
    assert monitor.handle_event("offline") is True
    assert monitor.state == "offline"
    assert monitor.handle_event("offline") is False
    assert monitor.handle_event("online") is True
    assert seen == [False, True]

    with pytest.raises(ValueError):
        monitor.handle_event("flaky")


def test_listener_can_be_removed():
    seen = []
    monitor = ConnectivityMonitor()
    remove = monitor.add_listener(seen.append)
    remove()
    monitor.handle_event("offline")
    assert seen == []


# ========= offline submissions =========
def test_offline_ticket_is_queued_without_server_call(offline_client, queue):
    result = offline_client.submit_ticket("HCS-2024-ABCDEFGH")

    assert result.success is True
    assert result.offline is True
    assert result.message == "Ticket verification recorded offline. Will sync when online."
    offline_client.transport.verify.assert_not_called()

    records = queue.records()
    assert len(records) == 1
    rec = records[0]
    assert rec.status == PENDING_SYNC
    assert rec.verification_data == "HCS-2024-ABCDEFGH"
    assert rec.method == "ticket_number"
    assert rec.security_id == "42"
    assert rec.badge_number == "SEC-001"
    assert rec.timestamp == FIXED_NOW.isoformat()


def test_offline_pin_is_queued(offline_client, queue):
    result = offline_client.submit_pin("123456")
    assert result.success is True
    assert result.message == "PIN verification recorded offline. Will sync when online."
    assert queue.records()[0].method == "pin"


def test_bad_format_is_rejected_before_queueing(offline_client, queue):
    assert offline_client.submit_pin("12a456").success is False
    bad_ticket = offline_client.submit_ticket("HCS-24-XYZ")
    assert bad_ticket.success is False
    assert bad_ticket.message == "Invalid ticket format. Expected: HCS-YYYY-XXXXXXXX"
    assert queue.records() == []
    offline_client.transport.verify.assert_not_called()


def test_queue_survives_a_new_instance(offline_client, queue, tmp_path):
    offline_client.submit_pin("123456")
    offline_client.submit_pin("654321")

    reopened = OfflineQueue(tmp_path / "device", security_id="42")
    assert [r.verification_data for r in reopened.records()] == ["123456", "654321"]
    assert queue.path.name == "offline_verifications_42.json"
    assert len({r.id for r in reopened.records()}) == 2


def test_export_and_clear(offline_client, queue, tmp_path):
    offline_client.submit_pin("123456")
    offline_client.submit_ticket("HCS-2024-ABCDEFGH")

    out = queue.export(tmp_path / "exports")
    assert out.name == "offline_verifications_SEC-001_2024-12-15.json"
    data = json.loads(out.read_text(encoding="utf-8"))
    assert [row["verification_data"] for row in data] == ["123456", "HCS-2024-ABCDEFGH"]
    assert all(row["status"] == "pending_sync" for row in data)

    result = offline_client.clear_offline()
    assert result.success is True
    assert queue.records() == []
    # export is a separate copy
    assert out.exists()


def test_missing_badge_is_unknown(tmp_path):
    q = OfflineQueue(tmp_path, security_id="7", badge_number=None)
    rec = q.append(verification_data="123456", method="pin")
    assert rec.badge_number == "UNKNOWN"
    assert isinstance(rec, OfflineRecord)


@pytest.mark.parametrize("security_id, badge", [
    ("a/b", "SEC-001"),
    ("../7", "SEC-001"),
    ("", "SEC-001"),
    ("7", "SEC 001"),
])
def test_ids_unusable_in_file_names_are_refused(tmp_path, security_id, badge):
    with pytest.raises(ValueError):
        OfflineQueue(tmp_path, security_id=security_id, badge_number=badge)
    assert list(tmp_path.iterdir()) == []


def test_similar_staff_ids_get_separate_queues(tmp_path):
    first = OfflineQueue(tmp_path, security_id="a_b")
    second = OfflineQueue(tmp_path, security_id="a.b")
    first.append(verification_data="123456", method="pin")

    assert first.path != second.path
    assert len(first) == 1
    assert len(second) == 0


# ========= online submissions =========
def test_online_goes_to_server_and_skips_queue(queue):
    transport = MagicMock(spec=HttpVerificationTransport)
    transport.verify.return_value = {
        "success": True,
        "message": "Attendee successfully verified and checked in.",
        "attendee": {"name": "Jane Doe", "already_checked_in": False},
    }
    client = VerificationClient(queue=queue, monitor=ConnectivityMonitor(online=True), transport=transport)

    result = client.submit_pin("123456")
    transport.verify.assert_called_once_with("pin", "123456")
    assert result.success is True
    assert result.offline is False
    assert result.attendee["name"] == "Jane Doe"
    assert queue.records() == []


def test_reconnecting_does_not_replay_queue(offline_client, queue):
    offline_client.submit_pin("123456")
    offline_client.monitor.handle_event("online")
    offline_client.transport.verify.return_value = {"success": True, "message": "ok"}

    offline_client.submit_pin("654321")
    offline_client.transport.verify.assert_called_once_with("pin", "654321")
    assert len(queue.records()) == 1


def test_transport_failure_is_a_system_error(queue):
    transport = MagicMock(spec=HttpVerificationTransport)
    transport.verify.side_effect = TransportError("connection refused")
    client = VerificationClient(queue=queue, monitor=ConnectivityMonitor(), transport=transport)

    result = client.submit_ticket("hcs-2024-abcdefgh")
    transport.verify.assert_called_once_with("ticket_number", "HCS-2024-ABCDEFGH")
    assert result.success is False
    assert result.error == "system_error"
    assert queue.records() == []


# ========= HTTP transport =========
def _response(status, body):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = body
    return resp


def test_http_transport_posts_with_device_token():
    session = MagicMock()
    session.headers = {}
    session.post.return_value = _response(404, {"success": False, "message": "Invalid PIN. No attendee found with this PIN."})

    transport = HttpVerificationTransport("https://summit.example/", "tok123", session=session, timeout=3)
    body = transport.verify("pin", "123456")

    session.post.assert_called_once_with(
        "https://summit.example/api/checkin/verify/pin/", json={"pin": "123456"}, timeout=3,
    )
    assert session.headers["Authorization"] == "Bearer tok123"
    assert body["success"] is False


def test_http_transport_wraps_network_and_body_errors():
    session = MagicMock()
    session.headers = {}
    transport = HttpVerificationTransport("https://summit.example", session=session)

    session.post.side_effect = requests.ConnectionError("boom")
    with pytest.raises(TransportError):
        transport.verify("ticket_number", "HCS-2024-ABCDEFGH")

    session.post.side_effect = None
    bad = MagicMock(status_code=502)
    bad.json.side_effect = ValueError("no json")
    session.post.return_value = bad
    with pytest.raises(TransportError):
        transport.verify("pin", "123456")

    with pytest.raises(ValueError):
        transport.verify("qr_code", "x")
