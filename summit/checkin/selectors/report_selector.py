# -*- coding: utf-8 -*-
"""
Admin reports. Read-only aggregates over AttendanceRecord, JobSeeker, UserProfile and AuditLog.
"""
from __future__ import annotations
from datetime import timedelta
from typing import Any, Dict, List, Optional

from django.contrib.auth import get_user_model
from django.db.models import Count, Q
from django.db.models.functions import TruncDate
from django.utils import timezone

from accounts.models import UserProfile
from checkin.models import AttendanceRecord, AuditLog, JobSeeker
from checkin.services.verification_service import DUPLICATE_NOTE


def _percent(part: int, whole: int, empty: int = 0) -> int:
    if not whole:
        return empty
    return round(part * 100 / whole)

def _daily(qs, field: str) -> List[Dict[str, Any]]:
    rows = (
        qs.annotate(day=TruncDate(field))
        .values("day")
        .annotate(count=Count("id"))
        .order_by("day")
    )
    return [{"date": r["day"].isoformat() if r["day"] else None, "count": r["count"]} for r in rows]


# ========= Attendance =========
def attendance_report(*, event_id: Optional[int] = None, days: int = 7) -> Dict[str, Any]:
    records = AttendanceRecord.objects.all()
    if event_id:
        records = records.filter(event_id=event_id)

    checked_in = records.filter(status=AttendanceRecord.Status.CHECKED_IN)
    unique_attendees = checked_in.values("job_seeker_id").distinct().count()
    total_registrations = JobSeeker.objects.count()
    approved = JobSeeker.objects.filter(registration_status=JobSeeker.RegistrationStatus.APPROVED).count()

    since = timezone.now() - timedelta(days=days)
    by_method = {r["verification_method"]: r["count"] for r in
                 records.values("verification_method").annotate(count=Count("id"))}
    by_status = {r["status"]: r["count"] for r in
                 records.values("status").annotate(count=Count("id"))}

    return {
        "event_id": event_id,
        "days": days,
        "total_records": records.count(),
        "unique_attendees": unique_attendees,
        "duplicate_attempts": records.filter(notes=DUPLICATE_NOTE).count(),
        "total_registrations": total_registrations,
        "approved_registrations": approved,
        "attendance_rate": _percent(unique_attendees, total_registrations),
        "by_method": by_method,
        "by_status": by_status,
        "daily": _daily(checked_in.filter(check_in_time__gte=since), "check_in_time"),
    }


# ========= System =========
def system_report(*, days: int = 7) -> Dict[str, Any]:
    now = timezone.now()
    since = now - timedelta(days=days)
    last_24h = now - timedelta(hours=24)

    users_by_role = list(
        UserProfile.objects.values("role").annotate(count=Count("id")).order_by("-count", "role")
    )

    logs = AuditLog.objects.filter(created_at__gte=since)
    totals = logs.aggregate(
        total=Count("id"),
        ok=Count("id", filter=Q(success=True)),
        failed=Count("id", filter=Q(success=False)),
    )
    active_24h = (
        AuditLog.objects.filter(created_at__gte=last_24h, actor__isnull=False)
        .values("actor").distinct().count()
    )
    recent = list(
        AuditLog.objects.order_by("-created_at", "-id")
        .values("id", "actor", "action", "object_type", "object_id", "success", "created_at")[:10]
    )

    return {
        "days": days,
        "total_users": get_user_model().objects.count(),
        "active_users_24h": active_24h,
        "users_by_role": users_by_role,
        "logs_total": totals["total"],
        "logs_success": totals["ok"],
        "logs_failed": totals["failed"],
        "reliability": _percent(totals["ok"], totals["total"], empty=100),
        "error_rate": _percent(totals["failed"], totals["total"]),
        "recent_logs": recent,
        "daily_activity": _daily(logs, "created_at"),
    }
