from django.urls import path, include
from rest_framework.routers import SimpleRouter
from checkin.views.incident_view import IncidentViewSet

router = SimpleRouter()
router.register(r"", IncidentViewSet, basename="incident")

urlpatterns = [
    path("", include(router.urls)),
]
