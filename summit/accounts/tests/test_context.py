import pytest
from django.contrib.auth import get_user_model

from accounts.context import (
    ActorContext, ANONYMOUS, actor_for_user, capabilities_for_role,
    CHECKIN_VERIFY, INCIDENT_REPORT, REGISTRATION_REVIEW, PROFILE_MANAGE,
)
from accounts.models import UserProfile, SecurityPersonnel
from accounts.services.routing import resolve_landing_path, landing_for_user


def test_role_capabilities():
    assert capabilities_for_role("security") >= {CHECKIN_VERIFY, INCIDENT_REPORT}
    assert REGISTRATION_REVIEW not in capabilities_for_role("security")
    assert capabilities_for_role("job_seeker") == {PROFILE_MANAGE}
    assert capabilities_for_role(None) == frozenset()


def test_staff_key_fallbacks():
    assert ActorContext(user_id=5, badge_number="SEC-9").staff_key == "SEC-9"
    assert ActorContext(user_id=5).staff_key == "5"
    assert ANONYMOUS.staff_key == "UNKNOWN"


@pytest.mark.django_db
def test_actor_for_security_user(security_user):
    actor = actor_for_user(security_user)
    assert actor.role == "security"
    assert actor.badge_number == "SEC-001"
    assert actor.can(CHECKIN_VERIFY)
    assert not actor.is_admin


@pytest.mark.django_db
def test_inactive_badge_is_ignored(security_user):
    SecurityPersonnel.objects.filter(user=security_user).update(is_active=False)
    assert actor_for_user(security_user).badge_number is None


@pytest.mark.django_db
def test_superuser_without_profile_is_admin():
    root = get_user_model().objects.create_superuser("root", "root@example.com", "pass")
    actor = actor_for_user(root)
    assert actor.is_admin
    assert actor.can(REGISTRATION_REVIEW)
    assert landing_for_user(root) == "/admin"


@pytest.mark.parametrize("role,complete,path", [
    ("admin", False, "/admin"),
    ("employer", False, "/employer/setup"),
    ("employer", True, "/employer"),
    ("security", False, "/security/setup"),
    ("security", True, "/security"),
    ("job_seeker", False, "/profile-setup"),
    ("job_seeker", True, "/dashboard"),
])
def test_landing_paths(role, complete, path):
    assert resolve_landing_path(UserProfile(role=role, profile_complete=complete)) == path


def test_landing_without_profile():
    assert resolve_landing_path(None) == "/profile-setup"


@pytest.mark.django_db
def test_me_endpoint(api_client, security_user):
    api_client.force_authenticate(user=security_user)
    r = api_client.get("/api/accounts/me/")
    assert r.status_code == 200
    body = r.json()
    assert body["role"] == "security"
    assert body["badge_number"] == "SEC-001"
    assert CHECKIN_VERIFY in body["capabilities"]
    assert body["landing_path"] == "/security"

    r = api_client.get("/api/accounts/landing/")
    assert r.json() == {"role": "security", "path": "/security"}


@pytest.mark.django_db
def test_new_user_lands_on_profile_setup(api_client, make_user):
    api_client.force_authenticate(user=make_user("fresh"))
    assert api_client.get("/api/accounts/landing/").json() == {"role": None, "path": "/profile-setup"}
