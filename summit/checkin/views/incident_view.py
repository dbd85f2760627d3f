# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import viewsets, status
from rest_framework.response import Response

from accounts.context import build_actor_context, INCIDENT_REPORT
from accounts.permissions import HasCapability
from checkin.models import SecurityIncident
from checkin.serializers.incident_serializer import IncidentReadSerializer, IncidentCreateSerializer
from checkin.services.incident_service import report_incident, list_incidents
from checkin.utils.pagination import DefaultPagination
from .utils import extend_schema, extend_schema_view, std_errors, error_response, SERVICE_ERRORS, PAGE_PARAMS


@extend_schema_view(
    list=extend_schema(
        tags=["Incidents"],
        summary="Incident reports",
        description="Admins see every report, security staff their own.",
        parameters=PAGE_PARAMS,
        responses={200: IncidentReadSerializer(many=True)},
    ),
    create=extend_schema(
        tags=["Incidents"],
        summary="Report a security incident",
        description="Required: incident_type, severity, location, description.",
        request=IncidentCreateSerializer,
        responses={201: IncidentReadSerializer, **std_errors()},
    ),
)
class IncidentViewSet(viewsets.GenericViewSet):
    serializer_class = IncidentReadSerializer
    permission_classes = [HasCapability]
    required_capability = INCIDENT_REPORT
    pagination_class = DefaultPagination
    queryset = SecurityIncident.objects.none()

    def list(self, request):
        try:
            qs = list_incidents(actor=build_actor_context(request))
        except SERVICE_ERRORS as e:
            return error_response(e)
        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(IncidentReadSerializer(page, many=True).data)
        return Response(IncidentReadSerializer(qs, many=True).data)

    def create(self, request):
        ser = IncidentCreateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            incident = report_incident(actor=build_actor_context(request), data=ser.validated_data)
        except SERVICE_ERRORS as e:
            return error_response(e)
        return Response(IncidentReadSerializer(incident).data, status=status.HTTP_201_CREATED)
