# checkin/urls/__init__.py
from django.urls import path, include

urlpatterns = [
    path("verify/", include("checkin.urls.verification_urls")),
    path("attendance/", include("checkin.urls.attendance_urls")),
    path("registration/", include("checkin.urls.registration_urls")),
    path("incidents/", include("checkin.urls.incident_urls")),
    path("events/", include("checkin.urls.event_urls")),
    path("reports/", include("checkin.urls.report_urls")),
]
