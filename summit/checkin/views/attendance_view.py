# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import viewsets, mixins

from accounts.context import REPORTS_VIEW
from accounts.permissions import HasCapability
from checkin.models import AttendanceRecord
from checkin.selectors.attendance_selector import filter_attendance
from checkin.serializers.attendance_serializer import AttendanceRecordReadSerializer
from checkin.utils.pagination import DefaultPagination
from .utils import extend_schema, extend_schema_view, path_int, q_int, q_str, q_date, PAGE_PARAMS


@extend_schema_view(
    list=extend_schema(
        tags=["Attendance"],
        summary="Attendance audit trail",
        description="Every verification attempt, newest first. Read-only.",
        parameters=PAGE_PARAMS + [
            q_int("event", "Event ID (comma-separated allowed)"),
            q_int("job_seeker", "Job seeker ID (comma-separated allowed)"),
            q_str("method", "pin | ticket_number | qr_code"),
            q_str("status", "checked_in | checked_out | flagged"),
            q_date("date_from", "Check-in date from (YYYY-MM-DD)"),
            q_date("date_to", "Check-in date to (YYYY-MM-DD)"),
        ],
        responses={200: AttendanceRecordReadSerializer(many=True)},
    ),
    retrieve=extend_schema(
        tags=["Attendance"],
        summary="Attendance record by ID",
        parameters=[path_int("id", "Record ID")],
        responses={200: AttendanceRecordReadSerializer},
    ),
)
class AttendanceRecordViewSet(
    viewsets.GenericViewSet,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
):
    serializer_class = AttendanceRecordReadSerializer
    permission_classes = [HasCapability]
    required_capability = REPORTS_VIEW
    pagination_class = DefaultPagination
    queryset = AttendanceRecord.objects.none()

    def get_queryset(self):
        if self.action == "list":
            return filter_attendance(self.request.query_params)
        return filter_attendance({})
