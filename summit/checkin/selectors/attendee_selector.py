# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Optional
from django.db.models import QuerySet

from checkin.models import JobSeeker
from checkin.repositories import job_seeker_repository as repo


def find_attendee_by_pin(pin: str) -> Optional[JobSeeker]:
    return repo.find_by_pin(pin)

def find_attendee_by_ticket(ticket_number: str) -> Optional[JobSeeker]:
    return repo.find_by_ticket(ticket_number)

def list_registrations(status: Optional[str] = None) -> QuerySet[JobSeeker]:
    if status and status not in JobSeeker.RegistrationStatus.values:
        status = None
    return repo.list_by_status(status)

get_job_seeker_by_id = repo.get_by_id
get_job_seeker_for_user = repo.get_for_user
