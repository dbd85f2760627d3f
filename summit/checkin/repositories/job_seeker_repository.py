# -*- coding: utf-8 -*-
"""
Repository layer for JobSeeker (plain DB access).
"""
from __future__ import annotations
from typing import Any, Dict, Optional
from django.db.models import QuerySet

from checkin.models import JobSeeker


def base_qs() -> QuerySet[JobSeeker]:
    return JobSeeker.objects.select_related("user")

def get_by_id(job_seeker_id: int) -> JobSeeker:
    return base_qs().get(id=job_seeker_id)

def get_for_user(user_id: int) -> Optional[JobSeeker]:
    return base_qs().filter(user_id=user_id).first()

def find_by_pin(pin: str) -> Optional[JobSeeker]:
    return base_qs().filter(pin=pin).first()

def find_by_ticket(ticket_number: str) -> Optional[JobSeeker]:
    return base_qs().filter(ticket_number=ticket_number).first()

def pin_exists(pin: str) -> bool:
    return JobSeeker.objects.filter(pin=pin).exists()

def ticket_exists(ticket_number: str) -> bool:
    return JobSeeker.objects.filter(ticket_number=ticket_number).exists()

def create(**fields: Any) -> JobSeeker:
    return JobSeeker.objects.create(**fields)

def update_fields(obj: JobSeeker, changes: Dict[str, Any]) -> JobSeeker:
    for k, v in changes.items():
        setattr(obj, k, v)
    obj.save(update_fields=list(changes.keys()) + ["updated_at"])
    return obj

def list_by_status(status: Optional[str] = None) -> QuerySet[JobSeeker]:
    qs = base_qs()
    if status:
        qs = qs.filter(registration_status=status)
    return qs.order_by("-created_at")
