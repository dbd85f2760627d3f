# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
from typing import Optional

from checkin.models import Event
from checkin.repositories import event_repository as repo

logger = logging.getLogger(__name__)


def get_active_event() -> Optional[Event]:
    """
    The event check-ins are recorded against.
    Several active events: warn and use the one with the latest start_date.
    """
    events = list(repo.active_events()[:2])
    if not events:
        return None
    if len(events) > 1:
        logger.warning(
            "[checkin.event] %d+ active events; using #%s (%s)",
            len(events), events[0].id, events[0].name,
        )
    return events[0]

get_event_by_id = repo.get_by_id
