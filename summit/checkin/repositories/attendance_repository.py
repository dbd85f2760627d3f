# -*- coding: utf-8 -*-
"""
Repository layer for AttendanceRecord (plain DB access):
- inserts and filters only; rows are never updated or deleted
- no business rules here; the verification service decides what to write
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional
from django.db.models import QuerySet

from checkin.models import AttendanceRecord


# ============================
# Base queries
# ============================
def base_qs() -> QuerySet[AttendanceRecord]:
    return AttendanceRecord.objects.select_related("job_seeker__user", "event", "verified_by")

def latest_checked_in(job_seeker_id: int) -> Optional[AttendanceRecord]:
    return (
        AttendanceRecord.objects
        .filter(job_seeker_id=job_seeker_id, status=AttendanceRecord.Status.CHECKED_IN)
        .order_by("-check_in_time", "-id")
        .first()
    )

def filter_records(filters: Dict[str, Any], order_by: Optional[List[str]] = None) -> QuerySet[AttendanceRecord]:
    qs = base_qs()
    if (event_ids := filters.get("event")):
        qs = qs.filter(event_id__in=event_ids)
    if (js_ids := filters.get("job_seeker")):
        qs = qs.filter(job_seeker_id__in=js_ids)
    if (methods := filters.get("method")):
        qs = qs.filter(verification_method__in=methods)
    if (statuses := filters.get("status")):
        qs = qs.filter(status__in=statuses)
    if (d_from := filters.get("date_from")):
        qs = qs.filter(check_in_time__date__gte=d_from)
    if (d_to := filters.get("date_to")):
        qs = qs.filter(check_in_time__date__lte=d_to)
    return qs.order_by(*(order_by or ["-check_in_time", "-id"]))


# ============================
# Writes
# ============================
def create_record(
    *,
    job_seeker_id: int,
    event_id: int,
    verified_by_id: Optional[int],
    verified_badge: str,
    verification_method: str,
    verification_data: str,
    status: str = AttendanceRecord.Status.CHECKED_IN,
    notes: str = "",
) -> AttendanceRecord:
    return AttendanceRecord.objects.create(
        job_seeker_id=job_seeker_id,
        event_id=event_id,
        verified_by_id=verified_by_id,
        verified_badge=verified_badge or "",
        verification_method=verification_method,
        verification_data=verification_data,
        status=status,
        notes=notes or "",
    )
