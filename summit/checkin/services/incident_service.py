# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Any, Dict, List
import logging

from django.core.exceptions import ValidationError
from django.db.models import QuerySet

from accounts.context import ActorContext, INCIDENT_REPORT
from checkin.models import SecurityIncident
from checkin.services.audit_service import log_action

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("incident_type", "severity", "location", "description")
MISSING_FIELDS_MESSAGE = "Please fill in all required fields (Type, Severity, Location, Description)"


def _persons(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(p).strip() for p in value if str(p).strip()]


def report_incident(*, actor: ActorContext, data: Dict[str, Any]) -> SecurityIncident:
    if not actor.can(INCIDENT_REPORT):
        raise PermissionError("Only security personnel can report incidents.")

    clean = {k: (str(data.get(k) or "")).strip() for k in REQUIRED_FIELDS}
    if not all(clean.values()):
        raise ValidationError(MISSING_FIELDS_MESSAGE)
    if clean["incident_type"] not in SecurityIncident.IncidentType.values:
        raise ValidationError(f"Unknown incident type: {clean['incident_type']}")
    if clean["severity"] not in SecurityIncident.Severity.values:
        raise ValidationError(f"Unknown severity: {clean['severity']}")

    incident = SecurityIncident.objects.create(
        reported_by_id=actor.user_id,
        reporter_badge=actor.badge_number or "",
        involved_persons=_persons(data.get("involved_persons")),
        action_taken=(data.get("action_taken") or "").strip(),
        **clean,
    )
    log_action(
        actor=actor, action="incident.report", object_type="security_incident", object_id=incident.id,
        after={"incident_type": incident.incident_type, "severity": incident.severity, "location": incident.location},
    )
    if incident.severity in (SecurityIncident.Severity.HIGH, SecurityIncident.Severity.CRITICAL):
        logger.warning(
            "[checkin.incident] %s %s at %s (#%s, by=%s)",
            incident.severity, incident.incident_type, incident.location, incident.id, actor.staff_key,
        )
    return incident


def list_incidents(*, actor: ActorContext) -> QuerySet[SecurityIncident]:
    """Admins see every report; staff see their own."""
    qs = SecurityIncident.objects.select_related("reported_by")
    if actor.is_admin:
        return qs
    if not actor.can(INCIDENT_REPORT):
        raise PermissionError("Incident access denied.")
    return qs.filter(reported_by_id=actor.user_id)
