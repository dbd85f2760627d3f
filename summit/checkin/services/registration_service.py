# -*- coding: utf-8 -*-
"""
Service for attendee (JobSeeker) registration:
- profile creation issues PIN + ticket number (one transaction: user update + profile insert)
- PIN re-issue, self-confirmation with ticket + PIN, admin approve / reject
- DB access via repository; notifications after the write has committed
"""
from __future__ import annotations
from datetime import timedelta
from typing import Any, Dict
import logging

from django.conf import settings
from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from accounts.context import ActorContext, REGISTRATION_REVIEW
from accounts.models import UserProfile
from checkin.models import JobSeeker
from checkin.repositories import job_seeker_repository as repo
from checkin.services.audit_service import log_action
from checkin.services.notification_service import send_credentials, notify_registration_decision
from checkin.utils.credentials import (
    generate_secure_pin, generate_ticket_number, normalize_ticket_number,
    validate_pin_format, validate_ticket_number_format,
)

logger = logging.getLogger(__name__)

MAX_CREDENTIAL_ATTEMPTS = 20

PROFILE_FIELDS = (
    "bio", "cv_url", "skills", "education", "experience", "interest_categories",
    "linkedin_url", "portfolio_url", "expected_salary", "available_from",
)


# ========= helpers =========
def _pin_expiry(now=None):
    hours = int(getattr(settings, "PIN_TTL_HOURS", 24))
    return (now or timezone.now()) + timedelta(hours=hours)

def _unique_pin() -> str:
    for _ in range(MAX_CREDENTIAL_ATTEMPTS):
        pin = generate_secure_pin()
        if not repo.pin_exists(pin):
            return pin
    raise RuntimeError("Could not allocate a unique PIN.")

def _unique_ticket() -> str:
    prefix = getattr(settings, "TICKET_PREFIX", "HCS")
    for _ in range(MAX_CREDENTIAL_ATTEMPTS):
        ticket = generate_ticket_number(prefix)
        if not repo.ticket_exists(ticket):
            return ticket
    raise RuntimeError("Could not allocate a unique ticket number.")

def _split_name(full_name: str):
    parts = (full_name or "").strip().split(" ", 1)
    return parts[0], (parts[1].strip() if len(parts) > 1 else "")

def _require_job_seeker_actor(actor: ActorContext):
    # users without a role yet are allowed to complete a job seeker profile
    if actor.user_id is None:
        raise PermissionError("Authentication required.")
    if actor.role not in (None, UserProfile.Role.JOB_SEEKER):
        raise PermissionError("Only job seekers can manage an attendee profile.")


# ========= Profile =========
def create_job_seeker_profile(*, actor: ActorContext, data: Dict[str, Any]) -> JobSeeker:
    _require_job_seeker_actor(actor)

    full_name = (data.get("full_name") or "").strip()
    if not full_name:
        raise ValidationError("Full name is required.")
    phone = (data.get("phone_number") or "").strip()

    if repo.get_for_user(actor.user_id) is not None:
        raise ValueError("Profile already exists for this user")

    now = timezone.now()
    with transaction.atomic():
        user = get_user_model().objects.select_for_update().get(pk=actor.user_id)
        user.first_name, user.last_name = _split_name(full_name)
        user.save(update_fields=["first_name", "last_name"])

        UserProfile.objects.update_or_create(
            user=user,
            defaults={
                "role": UserProfile.Role.JOB_SEEKER,
                "phone_number": phone,
                "profile_complete": True,
            },
        )

        js = repo.create(
            user=user,
            pin=_unique_pin(),
            ticket_number=_unique_ticket(),
            registration_status=JobSeeker.RegistrationStatus.PENDING,
            pin_generated_at=now,
            pin_expires_at=_pin_expiry(now),
            **{k: data[k] for k in PROFILE_FIELDS if data.get(k) not in (None, "")},
        )
        log_action(
            actor=actor, action="job_seeker.create", object_type="job_seeker", object_id=js.id,
            after={"ticket_number": js.ticket_number, "registration_status": js.registration_status},
        )

    logger.info("[checkin.registration] profile created js=%s user=%s", js.id, actor.user_id)
    send_credentials(js, phone_number=phone)
    return js


@transaction.atomic
def update_job_seeker_profile(*, actor: ActorContext, changes: Dict[str, Any]) -> JobSeeker:
    _require_job_seeker_actor(actor)
    js = repo.get_for_user(actor.user_id)
    if js is None:
        raise LookupError("Profile not found.")

    if changes.get("full_name"):
        user = js.user
        user.first_name, user.last_name = _split_name(changes["full_name"])
        user.save(update_fields=["first_name", "last_name"])
    if changes.get("phone_number"):
        UserProfile.objects.filter(user_id=actor.user_id).update(phone_number=changes["phone_number"])

    field_changes = {k: changes[k] for k in PROFILE_FIELDS if k in changes}
    if field_changes:
        repo.update_fields(js, field_changes)
    return js


# ========= PIN =========
def regenerate_pin(*, actor: ActorContext) -> JobSeeker:
    _require_job_seeker_actor(actor)
    js = repo.get_for_user(actor.user_id)
    if js is None:
        raise LookupError("Profile not found.")

    now = timezone.now()
    with transaction.atomic():
        old_expiry = js.pin_expires_at
        repo.update_fields(js, {
            "pin": _unique_pin(),
            "pin_generated_at": now,
            "pin_expires_at": _pin_expiry(now),
        })
        log_action(
            actor=actor, action="job_seeker.pin_regenerate", object_type="job_seeker", object_id=js.id,
            before={"pin_expires_at": old_expiry.isoformat() if old_expiry else None},
            after={"pin_expires_at": js.pin_expires_at.isoformat()},
        )

    phone = UserProfile.objects.filter(user_id=js.user_id).values_list("phone_number", flat=True).first() or ""
    send_credentials(js, phone_number=phone, reissued=True)
    return js


def confirm_registration(*, ticket_number: str, pin: str) -> Dict[str, Any]:
    """
    Attendee self-confirmation with ticket number + PIN.
    Returns {success, message[, expired][, attendee]}.
    """
    ticket_number = normalize_ticket_number(ticket_number)
    if not (validate_ticket_number_format(ticket_number) and validate_pin_format(pin)):
        return {"success": False, "message": "Invalid ticket number or PIN"}

    js = repo.base_qs().filter(ticket_number=ticket_number, pin=pin).first()
    if js is None:
        return {"success": False, "message": "Invalid ticket number or PIN"}

    if js.pin_expired():
        log_action(
            actor=js.user_id, action="job_seeker.confirm", object_type="job_seeker",
            object_id=js.id, success=False, after={"reason": "pin_expired"},
        )
        return {"success": False, "message": "PIN has expired. Please request a new one.", "expired": True}

    before = js.registration_status
    repo.update_fields(js, {"registration_status": JobSeeker.RegistrationStatus.APPROVED})
    log_action(
        actor=js.user_id, action="job_seeker.confirm", object_type="job_seeker", object_id=js.id,
        before={"registration_status": before}, after={"registration_status": js.registration_status},
    )
    return {
        "success": True,
        "message": "PIN verified successfully",
        "attendee": {
            "id": js.id,
            "name": js.full_name,
            "email": js.user.email or "",
            "ticket_number": js.ticket_number,
        },
    }


# ========= Admin decision =========
def decide_registration(*, actor: ActorContext, job_seeker_id: int, approve: bool, reason: str = "") -> JobSeeker:
    if not actor.can(REGISTRATION_REVIEW):
        raise PermissionError("Registration review privilege required.")

    with transaction.atomic():
        try:
            js = repo.base_qs().select_for_update().get(id=job_seeker_id)
        except JobSeeker.DoesNotExist:
            raise LookupError("Job seeker not found.")

        before = js.registration_status
        new_status = JobSeeker.RegistrationStatus.APPROVED if approve else JobSeeker.RegistrationStatus.REJECTED
        repo.update_fields(js, {
            "registration_status": new_status,
            "decided_by": actor.user_id,
            "decided_at": timezone.now(),
            "decision_reason": (reason or "")[:255],
        })
        log_action(
            actor=actor, action="job_seeker.decide", object_type="job_seeker", object_id=js.id,
            before={"registration_status": before}, after={"registration_status": new_status, "reason": reason},
        )

    notify_registration_decision(js, reason=reason)
    return js
