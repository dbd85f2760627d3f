# -*- coding: utf-8 -*-
from __future__ import annotations
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import extend_schema_field
from rest_framework import serializers


@extend_schema_field(OpenApiTypes.STR)
class RawCredentialField(serializers.Field):
    """Hands the submitted value through untouched; null becomes an empty string."""

    def __init__(self, **kwargs):
        kwargs.setdefault("required", False)
        kwargs.setdefault("allow_null", True)
        kwargs.setdefault("default", "")
        super().__init__(**kwargs)

    def validate_empty_values(self, data):
        if data is None:
            return True, ""
        return super().validate_empty_values(data)

    def to_internal_value(self, data):
        return data

    def to_representation(self, value):
        return value


# Format is checked by the service so the envelope carries the message
class PinVerifySerializer(serializers.Serializer):
    pin = RawCredentialField()


class TicketVerifySerializer(serializers.Serializer):
    ticket_number = RawCredentialField()


class VerifiedAttendeeSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    name = serializers.CharField()
    email = serializers.CharField(allow_blank=True)
    pin = serializers.CharField()
    ticket_number = serializers.CharField()
    registration_status = serializers.CharField()
    check_in_time = serializers.DateTimeField(allow_null=True, help_text="Previous check-in when this is a duplicate")
    already_checked_in = serializers.BooleanField()


class VerificationResultSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()
    error = serializers.CharField(required=False, help_text="invalid_format | not_found | not_approved | no_active_event | system_error")
    attendee = VerifiedAttendeeSerializer(required=False)
    record_id = serializers.IntegerField(required=False)
