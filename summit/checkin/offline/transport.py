# -*- coding: utf-8 -*-
"""
HTTP transport used by the staff-device client to reach the verification API.
"""
from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import requests

logger = logging.getLogger(__name__)

_PATHS = {
    "pin": ("/api/checkin/verify/pin/", "pin"),
    "ticket_number": ("/api/checkin/verify/ticket/", "ticket_number"),
}


class TransportError(Exception):
    """Network failure or an answer that is not the verification envelope."""


class HttpVerificationTransport:
    def __init__(
        self,
        base_url: str,
        device_token: str = "",
        *,
        timeout: float = 8,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        if device_token:
            self.session.headers["Authorization"] = f"Bearer {device_token}"

    def verify(self, method: str, value: str) -> Dict[str, Any]:
        """POST the credential; returns the server's {success, message, ...} body."""
        try:
            path, key = _PATHS[method]
        except KeyError:
            raise ValueError(f"Unsupported verification method: {method}")

        url = f"{self.base_url}{path}"
        try:
            r = self.session.post(url, json={key: value}, timeout=self.timeout)
        except requests.RequestException as ex:
            raise TransportError(str(ex)) from ex

        try:
            body = r.json()
        except ValueError:
            raise TransportError(f"HTTP {r.status_code}: non-JSON response")
        if not isinstance(body, dict) or "success" not in body:
            raise TransportError(f"HTTP {r.status_code}: unexpected body")
        if r.status_code >= 500:
            logger.warning("[checkin.offline] server error %s for %s", r.status_code, method)
        return body
