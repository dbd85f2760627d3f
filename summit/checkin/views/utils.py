# views/utils.py
"""
drf-spectacular helpers and error mapping shared by the check-in views.

    from .utils import extend_schema, extend_schema_view, std_errors, q_int, error_response
"""
from django.core.exceptions import ValidationError
from drf_spectacular.utils import (
    extend_schema, extend_schema_view,
    OpenApiParameter, OpenApiExample, OpenApiResponse, inline_serializer,
)
from drf_spectacular.types import OpenApiTypes
from rest_framework import serializers
from rest_framework.response import Response

__all__ = [
    "extend_schema", "extend_schema_view", "OpenApiParameter", "OpenApiExample",
    "OpenApiResponse", "OpenApiTypes", "ErrorSerializer",
    "path_int", "q_int", "q_str", "q_date", "PAGE_PARAMS", "std_errors", "error_response", "SERVICE_ERRORS",
]

ErrorSerializer = inline_serializer(
    name="Error",
    fields={"detail": serializers.CharField()}
)

# ---- Param helpers

def path_int(name: str, description: str):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.PATH, description=description)

def q_int(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.INT, OpenApiParameter.QUERY, required=required, description=description)

def q_str(name: str, description: str, required: bool = False, enum=None):
    return OpenApiParameter(name, OpenApiTypes.STR, OpenApiParameter.QUERY, required=required, description=description, enum=enum)

def q_date(name: str, description: str, required: bool = False):
    return OpenApiParameter(name, OpenApiTypes.DATE, OpenApiParameter.QUERY, required=required, description=description)

PAGE_PARAMS = [
    q_int("page", "Page number (default 1)"),
    q_int("page_size", "Page size (default 20, max 200)"),
]

# ---- Responses

def std_errors(extra: dict | None = None):
    errs = {
        400: OpenApiResponse(ErrorSerializer, description="Bad Request"),
        401: OpenApiResponse(ErrorSerializer, description="Unauthorized"),
        403: OpenApiResponse(ErrorSerializer, description="Forbidden"),
        404: OpenApiResponse(ErrorSerializer, description="Not Found"),
    }
    if extra:
        errs.update(extra)
    return errs


def error_response(exc: Exception) -> Response:
    """Map a service exception to {"detail": ...} with the matching status."""
    if isinstance(exc, PermissionError):
        return Response({"detail": str(exc)}, status=403)
    if isinstance(exc, ValidationError):
        return Response({"detail": " ".join(exc.messages)}, status=400)
    if isinstance(exc, LookupError):
        return Response({"detail": str(exc)}, status=404)
    return Response({"detail": str(exc)}, status=400)


# what views catch from services
SERVICE_ERRORS = (PermissionError, ValidationError, LookupError, ValueError)
