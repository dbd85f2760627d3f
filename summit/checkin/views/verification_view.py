# checkin/views/verification_view.py
from rest_framework.views import APIView
from rest_framework.response import Response

from accounts.context import build_actor_context, CHECKIN_VERIFY
from accounts.permissions import HasCapability
from checkin.serializers.verification_serializer import (
    PinVerifySerializer, TicketVerifySerializer, VerificationResultSerializer,
)
from checkin.services.verification_service import (
    VerificationResult, verify_by_pin, verify_by_ticket,
    InvalidFormat, NotFound, NotApproved, NoActiveEvent, VerificationSystemError,
)
from .utils import extend_schema, extend_schema_view, OpenApiResponse, OpenApiExample

# failure kind -> HTTP status; the body is always the result envelope
STATUS_BY_ERROR = {
    InvalidFormat.code: 400,
    NotFound.code: 404,
    NotApproved.code: 409,
    NoActiveEvent.code: 503,
    VerificationSystemError.code: 500,
}

_ENVELOPE_RESPONSES = {
    code: OpenApiResponse(VerificationResultSerializer, description=desc)
    for code, desc in [
        (200, "Checked in (see attendee.already_checked_in)"),
        (400, "Invalid format"),
        (404, "No attendee with this credential"),
        (409, "Registration not approved"),
        (503, "No active event"),
        (500, "System error"),
    ]
}


def _respond(result: VerificationResult) -> Response:
    status = 200 if result.success else STATUS_BY_ERROR.get(result.error, 400)
    return Response(result.to_dict(), status=status)


@extend_schema_view(
    post=extend_schema(
        tags=["Check-in"],
        summary="Verify attendee by 6-digit PIN",
        description="Every accepted attempt is recorded, duplicates included.",
        request=PinVerifySerializer,
        responses=_ENVELOPE_RESPONSES,
        examples=[OpenApiExample("PIN", value={"pin": "123456"}, request_only=True)],
    )
)
class VerifyPinView(APIView):
    permission_classes = [HasCapability]
    required_capability = CHECKIN_VERIFY

    def post(self, request):
        ser = PinVerifySerializer(data=request.data)
        pin = ser.validated_data["pin"] if ser.is_valid() else ""
        result = verify_by_pin(pin, actor=build_actor_context(request))
        return _respond(result)


@extend_schema_view(
    post=extend_schema(
        tags=["Check-in"],
        summary="Verify attendee by ticket number",
        description="Ticket format: PREFIX-YYYY-XXXXXXXX (e.g. HCS-2024-ABCDEFGH).",
        request=TicketVerifySerializer,
        responses=_ENVELOPE_RESPONSES,
        examples=[OpenApiExample("Ticket", value={"ticket_number": "HCS-2024-ABCDEFGH"}, request_only=True)],
    )
)
class VerifyTicketView(APIView):
    permission_classes = [HasCapability]
    required_capability = CHECKIN_VERIFY

    def post(self, request):
        ser = TicketVerifySerializer(data=request.data)
        ticket = ser.validated_data["ticket_number"] if ser.is_valid() else ""
        result = verify_by_ticket(ticket, actor=build_actor_context(request))
        return _respond(result)
