import pytest
from datetime import timedelta
from django.contrib.auth import get_user_model
from django.utils import timezone
from rest_framework.test import APIClient

from accounts.context import actor_for_user
from accounts.models import UserProfile, SecurityPersonnel
from checkin.models import Event, JobSeeker

User = get_user_model()


@pytest.fixture(autouse=True)
def _no_sms_gateway(settings):
    settings.SMS_GATEWAY_URL = ""


@pytest.fixture
def make_user(db):
    def _make(username, role=None, *, badge=None, complete=True, phone="", **extra):
        user = User.objects.create_user(username=username, password="pass", **extra)
        if role:
            UserProfile.objects.create(user=user, role=role, phone_number=phone, profile_complete=complete)
        if badge:
            SecurityPersonnel.objects.create(user=user, badge_number=badge, assigned_area="Main gate")
        return user
    return _make


@pytest.fixture
def security_user(make_user):
    return make_user("guard", UserProfile.Role.SECURITY, badge="SEC-001")


@pytest.fixture
def admin_user(make_user):
    return make_user("boss", UserProfile.Role.ADMIN, email="admin@example.com")


@pytest.fixture
def seeker_user(make_user):
    return make_user("seeker", UserProfile.Role.JOB_SEEKER, email="seeker@example.com", phone="+254700000001")


@pytest.fixture
def security_actor(security_user):
    return actor_for_user(security_user)


@pytest.fixture
def admin_actor(admin_user):
    return actor_for_user(admin_user)


@pytest.fixture
def active_event(db):
    now = timezone.now()
    return Event.objects.create(
        name="Spring Fair", venue="Main Hall",
        start_date=now - timedelta(hours=2), end_date=now + timedelta(hours=6),
        is_active=True,
    )


@pytest.fixture
def make_attendee(make_user):
    def _make(full_name, pin, ticket, status=JobSeeker.RegistrationStatus.APPROVED, **extra):
        first, _, last = full_name.partition(" ")
        username = full_name.lower().replace(" ", ".")
        user = make_user(
            username, UserProfile.Role.JOB_SEEKER,
            first_name=first, last_name=last, email=f"{username}@example.com",
        )
        return JobSeeker.objects.create(
            user=user, pin=pin, ticket_number=ticket, registration_status=status,
            pin_expires_at=timezone.now() + timedelta(hours=24), **extra
        )
    return _make


@pytest.fixture
def jane(make_attendee):
    return make_attendee("Jane Doe", "123456", "HCS-2024-JANE0001")


@pytest.fixture
def api_client():
    return APIClient()
