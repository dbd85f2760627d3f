# -*- coding: utf-8 -*-
import pytest
from datetime import timedelta

from django.contrib.auth import get_user_model
from django.test import TestCase
from django.utils import timezone

from accounts.context import actor_for_user
from accounts.models import UserProfile, SecurityPersonnel
from checkin.models import AuditLog, Event
from checkin.services.event_service import activate_event, deactivate_event

URL = "/api/checkin/events/"


class EventActivationTests(TestCase):
    @classmethod
    def setUpTestData(cls):
        now = timezone.now()
        cls.running = Event.objects.create(
            name="Spring Fair", start_date=now - timedelta(hours=2), end_date=now + timedelta(hours=6),
            is_active=True,
        )
        cls.planned = Event.objects.create(
            name="Autumn Fair", venue="Hall C",
            start_date=now + timedelta(days=30), end_date=now + timedelta(days=31),
        )
        boss = UserProfile.objects.create(
            user=cls._user("boss"), role=UserProfile.Role.ADMIN,
        ).user
        guard = UserProfile.objects.create(
            user=cls._user("guard"), role=UserProfile.Role.SECURITY,
        ).user
        SecurityPersonnel.objects.create(user=guard, badge_number="SEC-001")
        cls.admin = actor_for_user(boss)
        cls.guard = actor_for_user(guard)

    @staticmethod
    def _user(username):
        return get_user_model().objects.create_user(username=username, password="pass")

    # ---------- tests ----------
    def test_exclusive_activation_switches_others_off(self):
        activate_event(actor=self.admin, event_id=self.planned.id)
        self.running.refresh_from_db()
        self.planned.refresh_from_db()
        self.assertTrue(self.planned.is_active)
        self.assertFalse(self.running.is_active)
        log = AuditLog.objects.get(action="event.activate")
        self.assertEqual(log.after["deactivated_others"], 1)

    def test_non_exclusive_activation_keeps_others(self):
        activate_event(actor=self.admin, event_id=self.planned.id, exclusive=False)
        self.assertEqual(Event.objects.filter(is_active=True).count(), 2)

    def test_event_management_is_admin_only(self):
        with self.assertRaises(PermissionError):
            activate_event(actor=self.guard, event_id=self.running.id)
        with self.assertRaises(PermissionError):
            deactivate_event(actor=self.guard, event_id=self.running.id)
        with self.assertRaises(LookupError):
            activate_event(actor=self.admin, event_id=999999)

    def test_deactivate(self):
        deactivate_event(actor=self.admin, event_id=self.running.id)
        self.running.refresh_from_db()
        self.assertFalse(self.running.is_active)
        self.assertFalse(AuditLog.objects.get(action="event.deactivate").after["is_active"])


@pytest.mark.django_db
def test_active_endpoint(api_client, security_user, active_event):
    api_client.force_authenticate(user=security_user)
    r = api_client.get(f"{URL}active/")
    assert r.status_code == 200
    assert r.json()["name"] == "Spring Fair"

    Event.objects.filter(id=active_event.id).update(is_active=False)
    assert api_client.get(f"{URL}active/").status_code == 404


@pytest.mark.django_db
def test_event_crud_api(api_client, admin_user, security_user):
    now = timezone.now()
    payload = {
        "name": "Winter Fair", "venue": "KICC",
        "start_date": (now + timedelta(days=1)).isoformat(),
        "end_date": (now + timedelta(days=2)).isoformat(),
        "is_active": True,
    }

    api_client.force_authenticate(user=security_user)
    assert api_client.post(URL, payload, format="json").status_code == 403

    api_client.force_authenticate(user=admin_user)
    r = api_client.post(URL, payload, format="json")
    assert r.status_code == 201, r.content
    event_id = r.json()["id"]
    # created inactive, activation is a separate step
    assert r.json()["is_active"] is False

    bad = {**payload, "end_date": (now - timedelta(days=1)).isoformat()}
    assert api_client.post(URL, bad, format="json").status_code == 400

    r = api_client.post(f"{URL}{event_id}/activate/", {}, format="json")
    assert r.status_code == 200
    assert r.json()["is_active"] is True

    r = api_client.patch(f"{URL}{event_id}/", {"venue": "Hall A"}, format="json")
    assert r.status_code == 200
    assert r.json()["venue"] == "Hall A"

    assert api_client.post(f"{URL}999999/deactivate/", {}, format="json").status_code == 404
