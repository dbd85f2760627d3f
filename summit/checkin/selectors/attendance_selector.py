# -*- coding: utf-8 -*-
"""
Selector for AttendanceRecord:
- normalise query-string input (string → list/date)
- delegate to the repository
"""
from __future__ import annotations
from typing import Any, Dict, List, Optional
from django.db.models import QuerySet
from django.utils.dateparse import parse_date

from checkin.models import AttendanceRecord
from checkin.repositories import attendance_repository as repo


def _as_int_list(v: Any) -> List[int]:
    if v is None:
        return []
    raw = []
    for x in (v if isinstance(v, (list, tuple, set)) else [v]):
        if x is not None:
            raw.extend(str(x).split(","))
    return [int(s.strip()) for s in raw if s.strip().isdigit()]

def _as_choice_list(v: Any, allowed) -> List[str]:
    if not v:
        return []
    raw = v if isinstance(v, (list, tuple, set)) else str(v).split(",")
    return [s.strip() for s in raw if s and s.strip() in allowed]

def _as_date(v: Any):
    if not v:
        return None
    try:
        return parse_date(str(v))
    except ValueError:
        return None


def filter_attendance(filters: Dict[str, Any], order_by: Optional[List[str]] = None) -> QuerySet[AttendanceRecord]:
    norm = {
        "event": _as_int_list(filters.get("event")),
        "job_seeker": _as_int_list(filters.get("job_seeker")),
        "method": _as_choice_list(filters.get("method"), AttendanceRecord.Method.values),
        "status": _as_choice_list(filters.get("status"), AttendanceRecord.Status.values),
        "date_from": _as_date(filters.get("date_from")),
        "date_to": _as_date(filters.get("date_to")),
    }
    return repo.filter_records(norm, order_by=order_by)

latest_checked_in = repo.latest_checked_in
