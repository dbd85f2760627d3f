# accounts/services/device_token_service.py
import time, uuid, jwt
from typing import Dict
from django.conf import settings
from django.core.exceptions import ValidationError

from accounts.context import ActorContext, CHECKIN_VERIFY

PURPOSE = "checkin_device"


def _secret() -> str:
    return getattr(settings, "JWT_SECRET", settings.SECRET_KEY)


def _algo() -> str:
    return getattr(settings, "JWT_ALGO", "HS256")


# ===== Core services =====
def issue_device_token(*, actor: ActorContext, device_label: str = "") -> Dict:
    """
    Security staff only.
    Returns {"token", "expires_at", "badge_number"}; token is a short-lived JWT.
    """
    if not actor.can(CHECKIN_VERIFY):
        raise PermissionError("Only security personnel can request a device token.")

    now = int(time.time())
    ttl = int(getattr(settings, "DEVICE_TOKEN_TTL", 12 * 60 * 60))
    payload = {
        "purpose": PURPOSE,
        "sub": str(actor.user_id),
        "badge": actor.badge_number or "",
        "device": device_label or "",
        "jti": uuid.uuid4().hex,
        "iat": now,
        "exp": now + ttl,
    }
    token = jwt.encode(payload, _secret(), algorithm=_algo())
    return {"token": token, "expires_at": payload["exp"], "badge_number": actor.badge_number or ""}


def decode_device_token(token: str) -> Dict:
    """
    Decode & check a device token.
    Returns the claims; raises ValidationError when the token is unusable.
    """
    if not token:
        raise ValidationError("missing device token")

    try:
        data = jwt.decode(token, _secret(), algorithms=[_algo()])
    except jwt.ExpiredSignatureError:
        raise ValidationError("device token expired")
    except jwt.InvalidTokenError:
        raise ValidationError("invalid device token")

    if data.get("purpose") != PURPOSE:
        raise ValidationError("wrong purpose")
    if not str(data.get("sub") or "").isdigit():
        raise ValidationError("invalid subject")
    return data
