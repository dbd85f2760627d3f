# -*- coding: utf-8 -*-
"""
Staff-device verification client.

    format check → offline: queue locally, report success
                 → online:  call the server, relay its answer

Queued records are not replayed automatically.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from checkin.offline.connectivity import ConnectivityMonitor
from checkin.offline.store import OfflineQueue, OfflineRecord
from checkin.offline.transport import HttpVerificationTransport, TransportError
from checkin.utils.credentials import (
    normalize_ticket_number, validate_pin_format, validate_ticket_number_format,
)

logger = logging.getLogger(__name__)

MSG_BAD_PIN = "Please enter a valid 6-digit PIN"
MSG_BAD_TICKET = "Invalid ticket format. Expected: HCS-YYYY-XXXXXXXX"
MSG_PIN_OFFLINE = "PIN verification recorded offline. Will sync when online."
MSG_TICKET_OFFLINE = "Ticket verification recorded offline. Will sync when online."
MSG_SYSTEM_ERROR = "Verification failed due to system error. Please try again."
MSG_CLEARED = "Offline records cleared."


@dataclass
class SubmissionResult:
    success: bool
    message: str
    offline: bool = False
    error: Optional[str] = None
    record: Optional[OfflineRecord] = None
    server: Optional[Dict[str, Any]] = None

    @property
    def attendee(self) -> Optional[Dict[str, Any]]:
        return (self.server or {}).get("attendee")


class VerificationClient:
    def __init__(
        self,
        *,
        queue: OfflineQueue,
        monitor: Optional[ConnectivityMonitor] = None,
        transport: Optional[HttpVerificationTransport] = None,
    ):
        self.queue = queue
        self.monitor = monitor or ConnectivityMonitor()
        self.transport = transport

    def submit_pin(self, pin: str) -> SubmissionResult:
        pin = (pin or "").strip()
        if not validate_pin_format(pin):
            return SubmissionResult(False, MSG_BAD_PIN, error="invalid_format")
        return self._submit("pin", pin, MSG_PIN_OFFLINE)

    def submit_ticket(self, ticket_number: str) -> SubmissionResult:
        ticket_number = normalize_ticket_number(ticket_number)
        if not validate_ticket_number_format(ticket_number):
            return SubmissionResult(False, MSG_BAD_TICKET, error="invalid_format")
        return self._submit("ticket_number", ticket_number, MSG_TICKET_OFFLINE)

    def clear_offline(self) -> SubmissionResult:
        self.queue.clear()
        return SubmissionResult(True, MSG_CLEARED)

    # ========= helpers =========
    def _submit(self, method: str, value: str, offline_message: str) -> SubmissionResult:
        if not self.monitor.is_online:
            record = self.queue.append(verification_data=value, method=method)
            return SubmissionResult(True, offline_message, offline=True, record=record)

        if self.transport is None:
            raise RuntimeError("Online verification needs a transport.")
        try:
            body = self.transport.verify(method, value)
        except TransportError as ex:
            logger.warning("[checkin.offline] %s verification transport failed: %s", method, ex)
            return SubmissionResult(False, MSG_SYSTEM_ERROR, error="system_error")

        return SubmissionResult(
            success=bool(body.get("success")),
            message=str(body.get("message") or ""),
            error=body.get("error"),
            server=body,
        )
