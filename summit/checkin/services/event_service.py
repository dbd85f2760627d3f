# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
from django.db import transaction

from accounts.context import ActorContext, EVENTS_MANAGE
from checkin.models import Event
from checkin.repositories import event_repository as repo
from checkin.services.audit_service import log_action

logger = logging.getLogger(__name__)


@transaction.atomic
def activate_event(*, actor: ActorContext, event_id: int, exclusive: bool = True) -> Event:
    """
    Mark an event active. With ``exclusive`` every other active event is switched off
    in the same transaction.
    """
    if not actor.can(EVENTS_MANAGE):
        raise PermissionError("Event management privilege required.")

    try:
        event = repo.get_by_id(event_id)
    except Event.DoesNotExist:
        raise LookupError("Event not found.")

    deactivated = repo.deactivate_others(event.id) if exclusive else 0
    was_active = event.is_active
    repo.set_active(event, True)

    log_action(
        actor=actor, action="event.activate", object_type="event", object_id=event.id,
        before={"is_active": was_active}, after={"is_active": True, "deactivated_others": deactivated},
    )
    logger.info("[checkin.event] #%s activated by=%s (others off: %s)", event.id, actor.user_id, deactivated)
    return event


@transaction.atomic
def deactivate_event(*, actor: ActorContext, event_id: int) -> Event:
    if not actor.can(EVENTS_MANAGE):
        raise PermissionError("Event management privilege required.")
    try:
        event = repo.get_by_id(event_id)
    except Event.DoesNotExist:
        raise LookupError("Event not found.")
    was_active = event.is_active
    repo.set_active(event, False)
    log_action(
        actor=actor, action="event.deactivate", object_type="event", object_id=event.id,
        before={"is_active": was_active}, after={"is_active": False},
    )
    return event
