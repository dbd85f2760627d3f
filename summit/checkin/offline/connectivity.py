# -*- coding: utf-8 -*-
"""
Online/offline flag for a staff device.

The flag only changes when the platform reports a connectivity event
(``handle_event("online" | "offline")``); it is never polled.
"""
from __future__ import annotations
import logging
import threading
from typing import Callable, List

logger = logging.getLogger(__name__)

ONLINE = "online"
OFFLINE = "offline"

Listener = Callable[[bool], None]


class ConnectivityMonitor:
    def __init__(self, online: bool = True):
        self._online = bool(online)
        self._listeners: List[Listener] = []
        self._lock = threading.Lock()

    @property
    def is_online(self) -> bool:
        return self._online

    @property
    def state(self) -> str:
        return ONLINE if self._online else OFFLINE

    def add_listener(self, listener: Listener) -> Callable[[], None]:
        with self._lock:
            self._listeners.append(listener)

        def remove():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)
        return remove

    def handle_event(self, event: str) -> bool:
        """Apply a connectivity event; returns True when the state changed."""
        if event not in (ONLINE, OFFLINE):
            raise ValueError(f"Unknown connectivity event: {event!r}")
        new_state = event == ONLINE
        with self._lock:
            if new_state == self._online:
                return False
            self._online = new_state
            listeners = list(self._listeners)

        logger.info("[checkin.offline] connectivity -> %s", event)
        for listener in listeners:
            listener(new_state)
        return True
