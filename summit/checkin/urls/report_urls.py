from django.urls import path
from checkin.views.report_view import AttendanceReportView, SystemReportView

urlpatterns = [
    path("attendance/", AttendanceReportView.as_view(), name="checkin-report-attendance"),
    path("system/", SystemReportView.as_view(), name="checkin-report-system"),
]
