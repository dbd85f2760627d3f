# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import serializers
from checkin.models import JobSeeker


class JobSeekerReadSerializer(serializers.ModelSerializer):
    """Own profile, credentials included."""
    full_name = serializers.CharField(read_only=True)
    email = serializers.CharField(source="user.email", read_only=True)
    status_display = serializers.CharField(source="get_registration_status_display", read_only=True)

    class Meta:
        model = JobSeeker
        fields = [
            "id", "full_name", "email",
            "pin", "ticket_number", "pin_generated_at", "pin_expires_at",
            "registration_status", "status_display",
            "bio", "cv_url", "skills", "education", "experience", "interest_categories",
            "linkedin_url", "portfolio_url", "expected_salary", "available_from",
            "created_at", "updated_at",
        ]


class JobSeekerAdminSerializer(serializers.ModelSerializer):
    full_name = serializers.CharField(read_only=True)
    email = serializers.CharField(source="user.email", read_only=True)

    class Meta:
        model = JobSeeker
        fields = [
            "id", "full_name", "email", "ticket_number",
            "registration_status", "decided_by", "decided_at", "decision_reason",
            "skills", "education", "experience", "interest_categories", "available_from",
            "created_at",
        ]


class JobSeekerProfileSerializer(serializers.Serializer):
    full_name = serializers.CharField(max_length=150)
    phone_number = serializers.CharField(max_length=32, required=False, allow_blank=True, default="")
    bio = serializers.CharField(required=False, allow_blank=True)
    cv_url = serializers.URLField(required=False, allow_blank=True)
    skills = serializers.ListField(child=serializers.CharField(), required=False)
    education = serializers.CharField(required=False, allow_blank=True)
    experience = serializers.CharField(required=False, allow_blank=True)
    interest_categories = serializers.ListField(child=serializers.CharField(), required=False)
    linkedin_url = serializers.URLField(required=False, allow_blank=True)
    portfolio_url = serializers.URLField(required=False, allow_blank=True)
    expected_salary = serializers.CharField(required=False, allow_blank=True, max_length=64)
    available_from = serializers.DateField(required=False, allow_null=True)


class JobSeekerProfileUpdateSerializer(JobSeekerProfileSerializer):
    full_name = serializers.CharField(max_length=150, required=False)
    phone_number = serializers.CharField(max_length=32, required=False, allow_blank=True)


class ConfirmRegistrationSerializer(serializers.Serializer):
    ticket_number = serializers.CharField()
    pin = serializers.CharField()


class RegistrationDecisionSerializer(serializers.Serializer):
    approve = serializers.BooleanField()
    reason = serializers.CharField(required=False, allow_blank=True, default="", max_length=255)
