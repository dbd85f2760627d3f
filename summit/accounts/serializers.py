# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import serializers


class MeSerializer(serializers.Serializer):
    user_id = serializers.IntegerField()
    username = serializers.CharField()
    email = serializers.CharField(allow_blank=True)
    full_name = serializers.CharField(allow_blank=True)
    role = serializers.CharField(allow_null=True)
    badge_number = serializers.CharField(allow_null=True)
    capabilities = serializers.ListField(child=serializers.CharField())
    landing_path = serializers.CharField()


class LandingSerializer(serializers.Serializer):
    role = serializers.CharField(allow_null=True)
    path = serializers.CharField()


class DeviceTokenRequestSerializer(serializers.Serializer):
    device_label = serializers.CharField(required=False, allow_blank=True, default="", max_length=64)


class DeviceTokenSerializer(serializers.Serializer):
    token = serializers.CharField()
    expires_at = serializers.IntegerField()
    badge_number = serializers.CharField(allow_blank=True)
