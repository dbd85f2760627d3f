from django.urls import path
from accounts.views import MeView, LandingView, DeviceTokenView

urlpatterns = [
    path("me/", MeView.as_view(), name="accounts-me"),
    path("landing/", LandingView.as_view(), name="accounts-landing"),
    path("device-token/", DeviceTokenView.as_view(), name="accounts-device-token"),
]
