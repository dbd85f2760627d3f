# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import serializers
from checkin.models import SecurityIncident


class IncidentReadSerializer(serializers.ModelSerializer):
    type_display = serializers.CharField(source="get_incident_type_display", read_only=True)
    severity_display = serializers.CharField(source="get_severity_display", read_only=True)

    class Meta:
        model = SecurityIncident
        fields = [
            "id", "reported_by", "reporter_badge",
            "incident_type", "type_display", "severity", "severity_display",
            "location", "description", "involved_persons", "action_taken",
            "created_at",
        ]


class IncidentCreateSerializer(serializers.Serializer):
    # required-field checks live in the service so the form gets one message
    incident_type = serializers.CharField(required=False, allow_blank=True)
    severity = serializers.CharField(required=False, allow_blank=True)
    location = serializers.CharField(required=False, allow_blank=True, max_length=200)
    description = serializers.CharField(required=False, allow_blank=True)
    involved_persons = serializers.JSONField(required=False, help_text="List of names or a comma-separated string")
    action_taken = serializers.CharField(required=False, allow_blank=True)
