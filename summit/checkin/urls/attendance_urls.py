from django.urls import path, include
from rest_framework.routers import SimpleRouter
from checkin.views.attendance_view import AttendanceRecordViewSet

router = SimpleRouter()
router.register(r"", AttendanceRecordViewSet, basename="attendance")

urlpatterns = [
    path("", include(router.urls)),
]
