import pytest
from django.core.exceptions import ValidationError

from accounts.context import actor_for_user
from checkin.models import AuditLog, SecurityIncident
from checkin.services.incident_service import report_incident, list_incidents, MISSING_FIELDS_MESSAGE

URL = "/api/checkin/incidents/"

REPORT = {
    "incident_type": "suspicious_activity",
    "severity": "medium",
    "location": "Gate B",
    "description": "Person loitering near the badge printer",
}


@pytest.mark.django_db
def test_report_incident_records_reporter(security_actor, security_user):
    inc = report_incident(actor=security_actor, data={**REPORT, "involved_persons": "John, , Mary ", "action_taken": "Escorted out"})
    assert inc.reported_by_id == security_user.id
    assert inc.reporter_badge == "SEC-001"
    assert inc.involved_persons == ["John", "Mary"]
    assert inc.action_taken == "Escorted out"
    assert AuditLog.objects.filter(action="incident.report", object_id=str(inc.id)).exists()


@pytest.mark.django_db
@pytest.mark.parametrize("missing", ["incident_type", "severity", "location", "description"])
def test_missing_required_field(security_actor, missing):
    data = {**REPORT, missing: "  "}
    with pytest.raises(ValidationError) as exc:
        report_incident(actor=security_actor, data=data)
    assert exc.value.messages == [MISSING_FIELDS_MESSAGE]
    assert SecurityIncident.objects.count() == 0


@pytest.mark.django_db
def test_unknown_choice_is_rejected(security_actor):
    with pytest.raises(ValidationError):
        report_incident(actor=security_actor, data={**REPORT, "severity": "apocalyptic"})


@pytest.mark.django_db
def test_high_severity_is_logged(security_actor, caplog):
    report_incident(actor=security_actor, data={**REPORT, "severity": "critical", "incident_type": "emergency"})
    assert "critical emergency at Gate B" in caplog.text


@pytest.mark.django_db
def test_job_seeker_cannot_report(seeker_user):
    with pytest.raises(PermissionError):
        report_incident(actor=actor_for_user(seeker_user), data=REPORT)


@pytest.mark.django_db
def test_staff_see_own_reports_admins_see_all(security_actor, admin_actor, make_user):
    other = actor_for_user(make_user("guard2", "security", badge="SEC-002"))
    mine = report_incident(actor=security_actor, data=REPORT)
    report_incident(actor=other, data=REPORT)

    assert list(list_incidents(actor=security_actor)) == [mine]
    assert list_incidents(actor=admin_actor).count() == 2


@pytest.mark.django_db
def test_incident_api(api_client, security_user, seeker_user):
    api_client.force_authenticate(user=security_user)
    r = api_client.post(URL, {**REPORT, "involved_persons": ["John"]}, format="json")
    assert r.status_code == 201, r.content
    assert r.json()["reporter_badge"] == "SEC-001"
    assert r.json()["involved_persons"] == ["John"]

    r = api_client.post(URL, {"incident_type": "other"}, format="json")
    assert r.status_code == 400
    assert r.json()["detail"] == MISSING_FIELDS_MESSAGE

    r = api_client.get(URL)
    assert r.status_code == 200
    assert r.json()["count"] == 1

    api_client.force_authenticate(user=seeker_user)
    assert api_client.get(URL).status_code == 403
