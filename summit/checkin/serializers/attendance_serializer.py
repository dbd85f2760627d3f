# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import serializers
from checkin.models import AttendanceRecord


class AttendanceRecordReadSerializer(serializers.ModelSerializer):
    attendee_name = serializers.CharField(source="job_seeker.full_name", read_only=True)
    ticket_number = serializers.CharField(source="job_seeker.ticket_number", read_only=True)
    event_name = serializers.CharField(source="event.name", read_only=True)
    method_display = serializers.CharField(source="get_verification_method_display", read_only=True)
    status_display = serializers.CharField(source="get_status_display", read_only=True)

    class Meta:
        model = AttendanceRecord
        fields = [
            "id",
            "job_seeker",
            "attendee_name",
            "ticket_number",
            "event",
            "event_name",
            "verified_by",
            "verified_badge",
            "verification_method",
            "method_display",
            "verification_data",
            "status",
            "status_display",
            "check_in_time",
            "notes",
        ]
        read_only_fields = fields
