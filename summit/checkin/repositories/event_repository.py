# -*- coding: utf-8 -*-
"""
Repository layer for Event (plain DB access).
"""
from __future__ import annotations
from django.db.models import QuerySet

from checkin.models import Event


def base_qs() -> QuerySet[Event]:
    return Event.objects.all()

def get_by_id(event_id: int) -> Event:
    return base_qs().get(id=event_id)

def active_events() -> QuerySet[Event]:
    return base_qs().filter(is_active=True).order_by("-start_date", "-id")

def set_active(event: Event, active: bool = True) -> Event:
    event.is_active = active
    event.save(update_fields=["is_active", "updated_at"])
    return event

def deactivate_others(event_id: int) -> int:
    return base_qs().filter(is_active=True).exclude(id=event_id).update(is_active=False)
