# -*- coding: utf-8 -*-
"""
Attendee-facing messages: welcome (PIN + ticket), PIN re-issue, registration decision.
Delivery failures are logged in Notification and never abort the caller.
"""
from __future__ import annotations
from typing import Dict
import logging

from django.conf import settings

from checkin.models import JobSeeker
from checkin.selectors.event_selector import get_active_event
from checkin.utils.notify import send_email_notification, send_sms_notification

logger = logging.getLogger(__name__)


def event_details() -> Dict[str, str]:
    event = get_active_event()
    if event is not None:
        return {
            "name": event.name,
            "date": f"{event.start_date:%B %d, %Y}",
            "venue": event.venue or getattr(settings, "EVENT_DISPLAY_VENUE", ""),
        }
    return {
        "name": getattr(settings, "EVENT_DISPLAY_NAME", "Career Summit"),
        "date": getattr(settings, "EVENT_DISPLAY_DATE", ""),
        "venue": getattr(settings, "EVENT_DISPLAY_VENUE", ""),
    }


def _welcome_text(name: str, pin: str, ticket: str, ev: Dict[str, str], reissued: bool = False) -> str:
    intro = "Your check-in PIN has been re-issued." if reissued else f"Welcome to {ev['name']}!"
    return (
        f"Hello {name},\n\n"
        f"{intro}\n"
        f"PIN: {pin} (valid {getattr(settings, 'PIN_TTL_HOURS', 24)} hours)\n"
        f"Ticket number: {ticket}\n\n"
        f"Event: {ev['name']}\n"
        f"Date: {ev['date'] or '-'}\n"
        f"Venue: {ev['venue'] or '-'}\n\n"
        "Show your PIN or ticket number to security staff at the entrance.\n"
    )


def _sms_text(name: str, pin: str, ticket: str, ev: Dict[str, str]) -> str:
    return f"{ev['name']}: Hi {name}, your check-in PIN is {pin}. Ticket: {ticket}."


def send_credentials(js: JobSeeker, *, phone_number: str = "", reissued: bool = False) -> Dict[str, bool]:
    """Email + SMS with the attendee's PIN and ticket number."""
    ev = event_details()
    name = js.full_name
    subject = "Your new check-in PIN" if reissued else f"Welcome to {ev['name']}"

    email_ok = send_email_notification(
        subject=subject,
        text_body=_welcome_text(name, js.pin, js.ticket_number, ev, reissued=reissued),
        to_emails=[js.user.email],
        mask=[js.pin],
        object_type="job_seeker",
        object_id=str(js.id),
        to_user=js.user_id,
    )
    sms_ok = send_sms_notification(
        phone_number=phone_number,
        text=_sms_text(name, js.pin, js.ticket_number, ev),
        mask=[js.pin],
        object_type="job_seeker",
        object_id=str(js.id),
        to_user=js.user_id,
    )
    if not (email_ok and sms_ok):
        logger.info("[checkin.notify] credentials js=%s email=%s sms=%s", js.id, email_ok, sms_ok)
    return {"email": email_ok, "sms": sms_ok}


def notify_registration_decision(js: JobSeeker, *, reason: str = "") -> bool:
    ev = event_details()
    status = js.get_registration_status_display()
    text = (
        f"Hello {js.full_name},\n\n"
        f"Your registration for {ev['name']} has been {status.upper()}.\n"
        f"Ticket number: {js.ticket_number}\n"
    )
    if reason:
        text += f"Note: {reason}\n"
    return send_email_notification(
        subject=f"Registration {status.lower()}",
        text_body=text,
        to_emails=[js.user.email],
        object_type="job_seeker",
        object_id=str(js.id),
        to_user=js.user_id,
    )
