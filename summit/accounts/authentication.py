import logging

from django.contrib.auth import get_user_model
from django.core.exceptions import ValidationError
from rest_framework import authentication, exceptions

from accounts.services.device_token_service import decode_device_token

logger = logging.getLogger(__name__)


class DeviceTokenAuthentication(authentication.BaseAuthentication):
    """
    ``Authorization: Bearer <device token>`` issued by /api/accounts/device-token/.
    """
    keyword = "Bearer"

    def authenticate(self, request):
        header = authentication.get_authorization_header(request).split()
        if not header or header[0].lower() != self.keyword.lower().encode():
            return None
        if len(header) != 2:
            raise exceptions.AuthenticationFailed("Invalid bearer header.")

        try:
            claims = decode_device_token(header[1].decode())
        except (ValidationError, UnicodeError) as ex:
            logger.info("[accounts.device_token] rejected: %s", ex)
            raise exceptions.AuthenticationFailed("Invalid or expired device token.")

        user = get_user_model().objects.filter(pk=int(claims["sub"]), is_active=True).first()
        if user is None:
            raise exceptions.AuthenticationFailed("User inactive or deleted.")
        return user, claims

    def authenticate_header(self, request):
        return self.keyword
