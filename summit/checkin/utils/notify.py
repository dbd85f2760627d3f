# -*- coding: utf-8 -*-
"""
Outbound email / SMS with a Notification row per attempt.

Both senders return True/False and never raise for delivery problems;
credentials passed in ``mask`` are starred out of everything that is logged.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, NamedTuple, Optional

import requests
from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.utils import timezone

from checkin.models import Notification

logger = logging.getLogger(__name__)


class GatewayReply(NamedTuple):
    ok: bool
    status: str
    text: str
    body: Optional[Dict[str, Any]]


# ========= helpers =========
def _mask(text: str, secrets: Optional[Iterable[str]] = None) -> str:
    out = text or ""
    for s in secrets or []:
        if s:
            out = out.replace(s, "*" * len(s))
    return out

def _mk_subject(subject: str) -> str:
    prefix = getattr(settings, "EMAIL_SUBJECT_PREFIX", "")
    return f"{prefix}{subject}" if prefix else subject

def _context(object_type: str, object_id: Any, to_user: Optional[int]) -> Dict[str, Any]:
    return {"object_type": object_type or "", "object_id": str(object_id or ""), "to_user": to_user}

def _record(
    channel: int,
    title: str,
    payload: Dict[str, Any],
    ctx: Dict[str, Any],
    *,
    delivered: bool,
    error: str = "",
    reply: Optional[GatewayReply] = None,
    **recipient: str,
) -> Notification:
    """Write one delivery attempt; ``recipient`` is to_email= or to_phone=."""
    message_id = ""
    if reply and isinstance(reply.body, dict):
        message_id = str(reply.body.get("message_id") or reply.body.get("id") or "")
    return Notification.objects.create(
        channel=channel,
        title=title[:200],
        payload=payload,
        delivered=delivered,
        delivered_at=timezone.now() if delivered else None,
        attempt_count=1,
        last_error=error,
        provider_message_id=message_id,
        provider_status_code=reply.status if reply else ("OK" if delivered else ""),
        provider_response=reply.body if reply and isinstance(reply.body, dict) else None,
        **ctx,
        **recipient,
    )


# ========= Email =========
def send_email_notification(
    *,
    subject: str,
    text_body: str,
    to_emails: Iterable[str],
    html_body: Optional[str] = None,
    mask: Optional[Iterable[str]] = None,
    object_type: str = "",
    object_id: str = "",
    to_user: Optional[int] = None,
) -> bool:
    secrets = list(mask or [])
    tos = [e for e in (to_emails or []) if e]
    title = _mk_subject(subject)
    ctx = _context(object_type, object_id, to_user)
    payload = {"kind": "email", "text": _mask(text_body, secrets), "has_html": bool(html_body), "tos": tos}

    if not tos:
        logger.warning("[notify.email] no recipients for %r; skip.", subject)
        _record(Notification.Channel.EMAIL, title, payload, ctx, delivered=False, error="No recipients")
        return False

    msg = EmailMultiAlternatives(
        subject=title,
        body=text_body,
        from_email=getattr(settings, "DEFAULT_FROM_EMAIL", None) or getattr(settings, "SERVER_EMAIL", None),
        to=tos,
    )
    if html_body:
        msg.attach_alternative(html_body, "text/html")

    error = ""
    try:
        msg.send(fail_silently=False)
    except Exception as ex:
        error = _mask(str(ex), secrets) or ex.__class__.__name__
        logger.warning("[notify.email] send to %s failed: %s", ",".join(tos), error)

    _record(
        Notification.Channel.EMAIL, title, payload, ctx,
        delivered=not error, error=error, to_email=",".join(tos),
    )
    return not error


# ========= SMS gateway =========
def _post_sms(url: str, body: Dict[str, Any], timeout: Optional[float] = None) -> GatewayReply:
    """POST JSON to the gateway; network errors come back as status ``EXC``."""
    headers = {}
    token = getattr(settings, "SMS_GATEWAY_TOKEN", "")
    if token:
        headers["Authorization"] = f"Bearer {token}"
    try:
        r = requests.post(url, json=body, headers=headers, timeout=timeout or getattr(settings, "SMS_TIMEOUT", 8))
    except requests.RequestException as ex:
        return GatewayReply(False, "EXC", str(ex), None)
    try:
        rjson = r.json()
    except ValueError:
        rjson = None
    return GatewayReply(r.status_code < 300, str(r.status_code), (r.text or "")[:2000], rjson)


def send_sms_notification(
    *,
    phone_number: str,
    text: str,
    mask: Optional[Iterable[str]] = None,
    timeout: Optional[float] = None,
    object_type: str = "",
    object_id: str = "",
    to_user: Optional[int] = None,
) -> bool:
    masked = _mask(text, mask)
    title = masked.splitlines()[0] if masked else "SMS"
    payload = {"kind": "sms", "text": masked}
    ctx = _context(object_type, object_id, to_user)
    url = getattr(settings, "SMS_GATEWAY_URL", "")

    skip = "No phone number" if not phone_number else ("SMS gateway not configured" if not url else "")
    if skip:
        logger.info("[notify.sms] %s; skip.", skip)
        _record(Notification.Channel.SMS, title, payload, ctx,
                delivered=False, error=skip, to_phone=phone_number or "")
        return False

    reply = _post_sms(url, {
        "to": phone_number,
        "message": text,
        "sender": getattr(settings, "SMS_SENDER_ID", ""),
    }, timeout=timeout)
    error = "" if reply.ok else _mask(reply.text, mask) or f"HTTP {reply.status}"
    if not reply.ok:
        logger.warning("[notify.sms] send to %s failed (%s): %s", phone_number, reply.status, error[:200])

    _record(Notification.Channel.SMS, title, payload, ctx,
            delivered=reply.ok, error=error, reply=reply, to_phone=phone_number)
    return reply.ok
