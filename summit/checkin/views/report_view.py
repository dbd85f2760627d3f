# checkin/views/report_view.py
from rest_framework.views import APIView
from rest_framework.response import Response

from accounts.context import REPORTS_VIEW
from accounts.permissions import HasCapability
from checkin.selectors.report_selector import attendance_report, system_report
from .utils import extend_schema, extend_schema_view, OpenApiResponse, q_int, std_errors


def _int_param(request, name, default=None, lo=None, hi=None):
    raw = request.query_params.get(name)
    if raw in (None, ""):
        return default
    value = int(raw)
    if lo is not None:
        value = max(lo, value)
    if hi is not None:
        value = min(hi, value)
    return value


@extend_schema_view(
    get=extend_schema(
        tags=["Reports"],
        summary="Attendance report",
        parameters=[q_int("event", "Event ID (default: all events)"), q_int("days", "Daily window (default 7, max 90)")],
        responses={200: OpenApiResponse(dict, description="Totals, duplicates, by method/status, daily counts"), **std_errors()},
    )
)
class AttendanceReportView(APIView):
    permission_classes = [HasCapability]
    required_capability = REPORTS_VIEW

    def get(self, request):
        try:
            event_id = _int_param(request, "event")
            days = _int_param(request, "days", 7, lo=1, hi=90)
        except ValueError:
            return Response({"detail": "event/days must be integers"}, status=400)
        return Response(attendance_report(event_id=event_id, days=days))


@extend_schema_view(
    get=extend_schema(
        tags=["Reports"],
        summary="System report",
        parameters=[q_int("days", "Window (default 7, max 90)")],
        responses={200: OpenApiResponse(dict, description="Users, audit-log reliability / error rate, recent activity"), **std_errors()},
    )
)
class SystemReportView(APIView):
    permission_classes = [HasCapability]
    required_capability = REPORTS_VIEW

    def get(self, request):
        try:
            days = _int_param(request, "days", 7, lo=1, hi=90)
        except ValueError:
            return Response({"detail": "days must be an integer"}, status=400)
        return Response(system_report(days=days))
