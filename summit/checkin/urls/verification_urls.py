from django.urls import path
from checkin.views.verification_view import VerifyPinView, VerifyTicketView

urlpatterns = [
    path("pin/", VerifyPinView.as_view(), name="checkin-verify-pin"),
    path("ticket/", VerifyTicketView.as_view(), name="checkin-verify-ticket"),
]
