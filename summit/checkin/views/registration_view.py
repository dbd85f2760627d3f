# -*- coding: utf-8 -*-
from __future__ import annotations
from rest_framework import viewsets, permissions, status
from rest_framework.decorators import action
from rest_framework.response import Response

from accounts.context import build_actor_context, REGISTRATION_REVIEW
from accounts.permissions import HasCapability
from checkin.models import JobSeeker
from checkin.selectors.attendee_selector import list_registrations, get_job_seeker_for_user
from checkin.serializers.registration_serializer import (
    JobSeekerReadSerializer,
    JobSeekerAdminSerializer,
    JobSeekerProfileSerializer,
    JobSeekerProfileUpdateSerializer,
    ConfirmRegistrationSerializer,
    RegistrationDecisionSerializer,
)
from checkin.services.registration_service import (
    create_job_seeker_profile as svc_create_profile,
    update_job_seeker_profile as svc_update_profile,
    regenerate_pin as svc_regenerate_pin,
    confirm_registration as svc_confirm,
    decide_registration as svc_decide,
)
from checkin.utils.pagination import DefaultPagination
from .utils import (
    extend_schema, extend_schema_view, OpenApiResponse, path_int, q_str, std_errors,
    error_response, SERVICE_ERRORS, PAGE_PARAMS,
)


@extend_schema_view(
    list=extend_schema(
        tags=["Registration"],
        summary="Registrations (admin)",
        parameters=PAGE_PARAMS + [q_str("status", "pending | approved | rejected")],
        responses={200: JobSeekerAdminSerializer(many=True)},
    ),
)
class RegistrationViewSet(viewsets.GenericViewSet):
    serializer_class = JobSeekerAdminSerializer
    permission_classes = [HasCapability]
    pagination_class = DefaultPagination
    queryset = JobSeeker.objects.none()

    @property
    def required_capability(self):
        if self.action in ("list", "decide"):
            return REGISTRATION_REVIEW
        # profile actions: role checks happen in the service (new users have no role yet)
        return None

    def get_permissions(self):
        if self.action == "confirm":
            return [permissions.AllowAny()]
        return super().get_permissions()

    def list(self, request):
        qs = list_registrations(request.query_params.get("status"))
        page = self.paginate_queryset(qs)
        if page is not None:
            return self.get_paginated_response(JobSeekerAdminSerializer(page, many=True).data)
        return Response(JobSeekerAdminSerializer(qs, many=True).data)

    @extend_schema(
        methods=["GET"],
        tags=["Registration"],
        summary="My attendee profile",
        responses={200: JobSeekerReadSerializer, 404: OpenApiResponse(description="No profile yet")},
    )
    @extend_schema(
        methods=["POST"],
        tags=["Registration"],
        summary="Complete attendee profile",
        description="Issues PIN + ticket number (status pending) and sends them by email and SMS.",
        request=JobSeekerProfileSerializer,
        responses={201: JobSeekerReadSerializer, **std_errors()},
    )
    @extend_schema(
        methods=["PATCH"],
        tags=["Registration"],
        summary="Update attendee profile",
        request=JobSeekerProfileUpdateSerializer,
        responses={200: JobSeekerReadSerializer, **std_errors()},
    )
    @action(detail=False, methods=["get", "post", "patch"], url_path="profile")
    def profile(self, request):
        actor = build_actor_context(request)
        if request.method == "GET":
            js = get_job_seeker_for_user(request.user.pk)
            if js is None:
                return Response({"detail": "Profile not found."}, status=status.HTTP_404_NOT_FOUND)
            return Response(JobSeekerReadSerializer(js).data)

        if request.method == "POST":
            ser = JobSeekerProfileSerializer(data=request.data)
            ser.is_valid(raise_exception=True)
            try:
                js = svc_create_profile(actor=actor, data=ser.validated_data)
            except SERVICE_ERRORS as e:
                return error_response(e)
            return Response(JobSeekerReadSerializer(js).data, status=status.HTTP_201_CREATED)

        ser = JobSeekerProfileUpdateSerializer(data=request.data, partial=True)
        ser.is_valid(raise_exception=True)
        try:
            js = svc_update_profile(actor=actor, changes=ser.validated_data)
        except SERVICE_ERRORS as e:
            return error_response(e)
        return Response(JobSeekerReadSerializer(js).data)

    @extend_schema(
        tags=["Registration"],
        summary="Re-issue my PIN",
        request=None,
        responses={200: JobSeekerReadSerializer, **std_errors()},
    )
    @action(detail=False, methods=["post"], url_path="regenerate-pin")
    def regenerate_pin(self, request):
        try:
            js = svc_regenerate_pin(actor=build_actor_context(request))
        except SERVICE_ERRORS as e:
            return error_response(e)
        return Response({
            "success": True,
            "message": "New PIN generated and sent successfully",
            "profile": JobSeekerReadSerializer(js).data,
        })

    @extend_schema(
        tags=["Registration"],
        summary="Confirm registration with ticket number + PIN",
        request=ConfirmRegistrationSerializer,
        responses={200: OpenApiResponse(description="{success, message, attendee}"),
                   400: OpenApiResponse(description="{success: false, message[, expired]}")},
    )
    @action(detail=False, methods=["post"], url_path="confirm")
    def confirm(self, request):
        ser = ConfirmRegistrationSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        result = svc_confirm(**ser.validated_data)
        return Response(result, status=200 if result["success"] else 400)

    @extend_schema(
        tags=["Registration"],
        summary="Approve / reject registration (admin)",
        parameters=[path_int("id", "Job seeker ID")],
        request=RegistrationDecisionSerializer,
        responses={200: JobSeekerAdminSerializer, **std_errors()},
    )
    @action(detail=True, methods=["post"], url_path="decide")
    def decide(self, request, pk=None):
        ser = RegistrationDecisionSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            js = svc_decide(actor=build_actor_context(request), job_seeker_id=int(pk), **ser.validated_data)
        except SERVICE_ERRORS as e:
            return error_response(e)
        return Response(JobSeekerAdminSerializer(js).data)
