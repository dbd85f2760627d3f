import pytest
from datetime import timedelta
from unittest.mock import patch
from django.utils import timezone

from checkin.models import AttendanceRecord, JobSeeker

PIN_URL = "/api/checkin/verify/pin/"
TICKET_URL = "/api/checkin/verify/ticket/"


@pytest.mark.django_db
def test_verify_pin_api_success_then_duplicate(api_client, security_user, jane, active_event):
    api_client.force_authenticate(user=security_user)

    r1 = api_client.post(PIN_URL, {"pin": "123456"}, format="json")
    assert r1.status_code == 200, r1.content
    body = r1.json()
    assert body["success"] is True
    assert body["attendee"]["already_checked_in"] is False

    r2 = api_client.post(PIN_URL, {"pin": "123456"}, format="json")
    assert r2.status_code == 200
    assert r2.json()["attendee"]["already_checked_in"] is True
    assert AttendanceRecord.objects.count() == 2


@pytest.mark.django_db
@pytest.mark.parametrize("payload,status,error", [
    ({"pin": "12a456"}, 400, "invalid_format"),
    ({}, 400, "invalid_format"),
    ({"pin": None}, 400, "invalid_format"),
    ({"pin": 123456}, 400, "invalid_format"),
    ({"pin": ["123456"]}, 400, "invalid_format"),
    ({"pin": "999999"}, 404, "not_found"),
])
def test_verify_pin_api_failures(api_client, security_user, jane, active_event, payload, status, error):
    api_client.force_authenticate(user=security_user)
    r = api_client.post(PIN_URL, payload, format="json")
    assert r.status_code == status
    assert r.json()["success"] is False
    assert r.json()["error"] == error
    assert r.json()["message"]


@pytest.mark.django_db
@pytest.mark.parametrize("payload", [{"ticket_number": None}, {"ticket_number": 2024}, ["HCS-2024-JANE0001"]])
def test_verify_ticket_rejects_non_string_input_with_envelope(api_client, security_user, jane, active_event, payload):
    api_client.force_authenticate(user=security_user)
    r = api_client.post(TICKET_URL, payload, format="json")
    assert r.status_code == 400
    assert r.json()["success"] is False
    assert r.json()["error"] == "invalid_format"
    assert not AttendanceRecord.objects.exists()


@pytest.mark.django_db
def test_verify_pending_attendee_returns_conflict(api_client, security_user, make_attendee, active_event):
    make_attendee("Paul Pending", "222222", "HCS-2024-PAUL0001", status=JobSeeker.RegistrationStatus.PENDING)
    api_client.force_authenticate(user=security_user)
    r = api_client.post(PIN_URL, {"pin": "222222"}, format="json")
    assert r.status_code == 409
    assert "pending" in r.json()["message"]


@pytest.mark.django_db
def test_verify_without_active_event_is_unavailable(api_client, security_user, jane):
    api_client.force_authenticate(user=security_user)
    r = api_client.post(TICKET_URL, {"ticket_number": "HCS-2024-JANE0001"}, format="json")
    assert r.status_code == 503
    assert r.json()["error"] == "no_active_event"


@pytest.mark.django_db
def test_verify_system_error_is_500_with_envelope(api_client, security_user, jane, active_event):
    api_client.force_authenticate(user=security_user)
    with patch("checkin.services.verification_service.get_active_event", side_effect=RuntimeError("db down")):
        r = api_client.post(PIN_URL, {"pin": "123456"}, format="json")
    assert r.status_code == 500
    assert r.json() == {
        "success": False,
        "message": "Verification failed due to system error. Please try again.",
        "error": "system_error",
    }


@pytest.mark.django_db
def test_verify_ticket_api(api_client, security_user, jane, active_event):
    api_client.force_authenticate(user=security_user)
    r = api_client.post(TICKET_URL, {"ticket_number": "HCS-2024-JANE0001"}, format="json")
    assert r.status_code == 200
    assert r.json()["attendee"]["name"] == "Jane Doe"


@pytest.mark.django_db
def test_verify_requires_checkin_capability(api_client, seeker_user, jane, active_event):
    api_client.force_authenticate(user=seeker_user)
    r = api_client.post(PIN_URL, {"pin": "123456"}, format="json")
    assert r.status_code == 403
    assert AttendanceRecord.objects.count() == 0


@pytest.mark.django_db
def test_verify_requires_authentication(api_client, jane, active_event):
    r = api_client.post(PIN_URL, {"pin": "123456"}, format="json")
    assert r.status_code in (401, 403)


@pytest.mark.django_db
def test_verify_with_device_token(api_client, security_user, jane, active_event):
    api_client.force_authenticate(user=security_user)
    token = api_client.post("/api/accounts/device-token/", {"device_label": "gate-1"}, format="json").json()["token"]

    device = type(api_client)()
    device.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    r = device.post(PIN_URL, {"pin": "123456"}, format="json")
    assert r.status_code == 200, r.content
    assert AttendanceRecord.objects.get().verified_by_id == security_user.id


@pytest.mark.django_db
def test_attendance_listing_filters(api_client, admin_user, security_user, jane, make_attendee, active_event):
    bob = make_attendee("Bob Smith", "333333", "HCS-2024-BOBS0001")
    api_client.force_authenticate(user=security_user)
    api_client.post(PIN_URL, {"pin": "123456"}, format="json")
    api_client.post(PIN_URL, {"pin": "123456"}, format="json")
    api_client.post(TICKET_URL, {"ticket_number": bob.ticket_number}, format="json")

    api_client.force_authenticate(user=admin_user)
    r = api_client.get("/api/checkin/attendance/")
    assert r.status_code == 200
    assert r.json()["count"] == 3

    r = api_client.get(f"/api/checkin/attendance/?job_seeker={jane.id}&method=pin")
    assert r.json()["count"] == 2
    assert {row["attendee_name"] for row in r.json()["results"]} == {"Jane Doe"}

    today = timezone.localdate()
    r = api_client.get(f"/api/checkin/attendance/?date_from={today + timedelta(days=1)}")
    assert r.json()["count"] == 0


@pytest.mark.django_db
def test_attendance_listing_is_read_only_and_admin_only(api_client, security_user, admin_user):
    api_client.force_authenticate(user=security_user)
    assert api_client.get("/api/checkin/attendance/").status_code == 403

    api_client.force_authenticate(user=admin_user)
    assert api_client.post("/api/checkin/attendance/", {}, format="json").status_code == 405
