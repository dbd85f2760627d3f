# accounts/views.py
from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import permissions
from rest_framework.authentication import SessionAuthentication, BasicAuthentication
from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiResponse

from accounts.context import build_actor_context, CHECKIN_VERIFY
from accounts.permissions import HasCapability
from accounts.serializers import (
    MeSerializer, LandingSerializer, DeviceTokenRequestSerializer, DeviceTokenSerializer,
)
from accounts.services.routing import landing_for_user
from accounts.services.device_token_service import issue_device_token


@extend_schema_view(
    get=extend_schema(
        tags=["Accounts"],
        summary="Current user, role and capabilities",
        responses={200: MeSerializer},
    )
)
class MeView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        actor = build_actor_context(request)
        user = request.user
        data = {
            "user_id": user.pk,
            "username": user.get_username(),
            "email": user.email or "",
            "full_name": user.get_full_name(),
            "role": actor.role,
            "badge_number": actor.badge_number,
            "capabilities": sorted(actor.capabilities),
            "landing_path": landing_for_user(user),
        }
        return Response(MeSerializer(data).data)


@extend_schema_view(
    get=extend_schema(
        tags=["Accounts"],
        summary="Where to send the user after login",
        description="admin → /admin; employer/security/job seeker → setup page until the profile is complete.",
        responses={200: LandingSerializer},
    )
)
class LandingView(APIView):
    permission_classes = [permissions.IsAuthenticated]

    def get(self, request):
        actor = build_actor_context(request)
        return Response({"role": actor.role, "path": landing_for_user(request.user)})


@extend_schema_view(
    post=extend_schema(
        tags=["Accounts"],
        summary="Issue a device token for a security handheld",
        request=DeviceTokenRequestSerializer,
        responses={200: DeviceTokenSerializer, 403: OpenApiResponse(description="Forbidden")},
    )
)
class DeviceTokenView(APIView):
    # password or session login only; a device token cannot renew itself
    authentication_classes = [SessionAuthentication, BasicAuthentication]
    permission_classes = [HasCapability]
    required_capability = CHECKIN_VERIFY

    def post(self, request):
        ser = DeviceTokenRequestSerializer(data=request.data)
        ser.is_valid(raise_exception=True)
        try:
            data = issue_device_token(actor=build_actor_context(request), **ser.validated_data)
        except PermissionError as e:
            return Response({"detail": str(e)}, status=403)
        return Response(DeviceTokenSerializer(data).data)
