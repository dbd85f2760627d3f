# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import viewsets, mixins, status
from rest_framework.decorators import action
from rest_framework.response import Response

from accounts.context import build_actor_context, EVENTS_MANAGE
from accounts.permissions import HasCapability
from checkin.models import Event
from checkin.selectors.event_selector import get_active_event
from checkin.serializers.event_serializer import EventSerializer, EventActivateSerializer
from checkin.services.event_service import activate_event, deactivate_event
from checkin.utils.pagination import DefaultPagination
from .utils import (
    extend_schema, extend_schema_view, OpenApiResponse, path_int, std_errors,
    error_response, SERVICE_ERRORS, PAGE_PARAMS,
)


@extend_schema_view(
    list=extend_schema(tags=["Events"], summary="List events", parameters=PAGE_PARAMS),
    retrieve=extend_schema(tags=["Events"], summary="Event by ID", parameters=[path_int("id", "Event ID")]),
    create=extend_schema(tags=["Events"], summary="Create event (inactive)", responses={201: EventSerializer, **std_errors()}),
    partial_update=extend_schema(tags=["Events"], summary="Update event fields", parameters=[path_int("id", "Event ID")]),
)
class EventViewSet(
    viewsets.GenericViewSet,
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.CreateModelMixin,
    mixins.UpdateModelMixin,
):
    queryset = Event.objects.all().order_by("-start_date", "-id")
    serializer_class = EventSerializer
    permission_classes = [HasCapability]
    pagination_class = DefaultPagination
    http_method_names = ["get", "post", "patch", "head", "options"]

    @property
    def required_capability(self):
        # anyone signed in may read which event is running
        if self.action in ("active", "list", "retrieve"):
            return None
        return EVENTS_MANAGE

    @extend_schema(
        tags=["Events"],
        summary="Currently active event",
        responses={200: EventSerializer, 404: OpenApiResponse(description="No active event")},
    )
    @action(detail=False, methods=["get"], url_path="active")
    def active(self, request):
        event = get_active_event()
        if event is None:
            return Response({"detail": "No active event."}, status=status.HTTP_404_NOT_FOUND)
        return Response(EventSerializer(event).data)

    @extend_schema(
        tags=["Events"],
        summary="Activate event",
        description="`exclusive=true` (default) deactivates every other event in the same transaction.",
        parameters=[path_int("id", "Event ID")],
        request=EventActivateSerializer,
        responses={200: EventSerializer, **std_errors()},
    )
    @action(detail=True, methods=["post"], url_path="activate")
    def activate(self, request, pk=None):
        ser = EventActivateSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            event = activate_event(actor=build_actor_context(request), event_id=int(pk), **ser.validated_data)
        except SERVICE_ERRORS as e:
            return error_response(e)
        return Response(EventSerializer(event).data)

    @extend_schema(
        tags=["Events"],
        summary="Deactivate event",
        parameters=[path_int("id", "Event ID")],
        request=None,
        responses={200: EventSerializer, **std_errors()},
    )
    @action(detail=True, methods=["post"], url_path="deactivate")
    def deactivate(self, request, pk=None):
        try:
            event = deactivate_event(actor=build_actor_context(request), event_id=int(pk))
        except SERVICE_ERRORS as e:
            return error_response(e)
        return Response(EventSerializer(event).data)
