# -*- coding: utf-8 -*-
"""
Attendee check-in verification (PIN / ticket number).

Order of checks:
- format (no DB access when it fails)
- attendee lookup by exact credential
- registration must be approved
- an active event must exist
- prior checked_in rows mark the attempt as a duplicate
Every accepted attempt inserts one AttendanceRecord, duplicates included.
"""
from __future__ import annotations
from dataclasses import dataclass, field, asdict
from typing import Any, Callable, Dict, Optional
import logging

from accounts.context import ActorContext
from checkin.models import AttendanceRecord, JobSeeker
from checkin.repositories import attendance_repository as attendance_repo
from checkin.selectors.attendee_selector import find_attendee_by_pin, find_attendee_by_ticket
from checkin.selectors.event_selector import get_active_event
from checkin.utils.credentials import validate_pin_format, validate_ticket_number_format

logger = logging.getLogger(__name__)

DUPLICATE_NOTE = "Duplicate check-in attempt"

MSG_CHECKED_IN = "Attendee successfully verified and checked in."
MSG_ALREADY_CHECKED_IN = "Attendee was already checked in, but verification logged."
MSG_SYSTEM_ERROR = "Verification failed due to system error. Please try again."


# ========= Errors =========
class CheckInError(Exception):
    code = "check_in_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidFormat(CheckInError):
    code = "invalid_format"


class NotFound(CheckInError):
    code = "not_found"


class NotApproved(CheckInError):
    code = "not_approved"

    def __init__(self, status: str):
        super().__init__(f"Attendee registration is {status}. Cannot check in.")
        self.status = status


class NoActiveEvent(CheckInError):
    code = "no_active_event"

    def __init__(self, message: str = "No active event found. Cannot process check-in."):
        super().__init__(message)


class VerificationSystemError(CheckInError):
    code = "system_error"

    def __init__(self, message: str = MSG_SYSTEM_ERROR):
        super().__init__(message)


# ========= Result =========
@dataclass
class VerificationResult:
    success: bool
    message: str
    error: Optional[str] = None
    attendee: Optional[Dict[str, Any]] = None
    record_id: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @property
    def already_checked_in(self) -> bool:
        return bool(self.attendee and self.attendee.get("already_checked_in"))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        extra = data.pop("extra") or {}
        data.update(extra)
        return {k: v for k, v in data.items() if v is not None}

    @classmethod
    def failure(cls, exc: CheckInError) -> "VerificationResult":
        return cls(success=False, message=exc.message, error=exc.code)


# ========= Method table =========
@dataclass(frozen=True)
class _Method:
    method: str
    validate: Callable[[Any], bool]
    lookup: Callable[[str], Optional[JobSeeker]]
    bad_format: str
    not_found: str


PIN_METHOD = _Method(
    method=AttendanceRecord.Method.PIN,
    validate=validate_pin_format,
    lookup=find_attendee_by_pin,
    bad_format="Invalid PIN format. Please enter a 6-digit PIN.",
    not_found="Invalid PIN. No attendee found with this PIN.",
)

TICKET_METHOD = _Method(
    method=AttendanceRecord.Method.TICKET_NUMBER,
    validate=validate_ticket_number_format,
    lookup=find_attendee_by_ticket,
    bad_format="Invalid ticket format. Expected format: HCS-YYYY-XXXXXXXX",
    not_found="Invalid ticket number. No attendee found with this ticket.",
)


# ========= helpers =========
def _attendee_payload(js: JobSeeker, prior: Optional[AttendanceRecord]) -> Dict[str, Any]:
    return {
        "id": js.id,
        "name": js.full_name,
        "email": js.user.email or "",
        "pin": js.pin,
        "ticket_number": js.ticket_number,
        "registration_status": js.registration_status,
        "check_in_time": prior.check_in_time.isoformat() if prior else None,
        "already_checked_in": prior is not None,
    }


def _check_in(m: _Method, value: Any, actor: ActorContext) -> VerificationResult:
    if not m.validate(value):
        raise InvalidFormat(m.bad_format)

    attendee = m.lookup(value)
    if attendee is None:
        raise NotFound(m.not_found)

    if attendee.registration_status != JobSeeker.RegistrationStatus.APPROVED:
        raise NotApproved(attendee.registration_status)

    event = get_active_event()
    if event is None:
        raise NoActiveEvent()

    # no lock: concurrent attempts may both record a first check-in
    prior = attendance_repo.latest_checked_in(attendee.id)

    record = attendance_repo.create_record(
        job_seeker_id=attendee.id,
        event_id=event.id,
        verified_by_id=actor.user_id,
        verified_badge=actor.badge_number or "",
        verification_method=m.method,
        verification_data=value,
        notes=DUPLICATE_NOTE if prior else "",
    )
    logger.info(
        "[checkin.verify] %s ok js=%s event=%s by=%s duplicate=%s",
        m.method, attendee.id, event.id, actor.staff_key, prior is not None,
    )
    return VerificationResult(
        success=True,
        message=MSG_ALREADY_CHECKED_IN if prior else MSG_CHECKED_IN,
        attendee=_attendee_payload(attendee, prior),
        record_id=record.id,
    )


def _run(m: _Method, value: Any, actor: ActorContext) -> VerificationResult:
    try:
        return _check_in(m, value, actor)
    except CheckInError as exc:
        logger.info("[checkin.verify] %s rejected (%s) by=%s", m.method, exc.code, actor.staff_key)
        return VerificationResult.failure(exc)
    except Exception:
        logger.exception("[checkin.verify] %s system error by=%s", m.method, actor.staff_key)
        return VerificationResult.failure(VerificationSystemError())


# ========= Public API =========
def verify_by_pin(pin: Any, *, actor: ActorContext) -> VerificationResult:
    return _run(PIN_METHOD, pin, actor)


def verify_by_ticket(ticket_number: Any, *, actor: ActorContext) -> VerificationResult:
    return _run(TICKET_METHOD, ticket_number, actor)
