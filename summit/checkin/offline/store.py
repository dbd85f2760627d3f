# -*- coding: utf-8 -*-
"""
Durable per-staff queue of verifications captured while offline.

Stored as a JSON list in ``offline_verifications_<staff_id>.json``. Records are
only appended; ``export`` writes a dated copy for manual hand-off and ``clear``
drops the whole file. Nothing here talks to the server.
"""
from __future__ import annotations
import json
import logging
import os
import re
import threading
import uuid
from dataclasses import dataclass, asdict, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, List, Optional, Union

logger = logging.getLogger(__name__)

PENDING_SYNC = "pending_sync"
UNKNOWN_BADGE = "UNKNOWN"

_FILE_ID = re.compile(r"[A-Za-z0-9_.-]+")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _file_id(value, what: str) -> str:
    """Ids end up in file names, so anything outside [A-Za-z0-9_.-] is refused."""
    value = str(value)
    if not _FILE_ID.fullmatch(value):
        raise ValueError(f"{what} {value!r} cannot be used in an offline queue file name")
    return value


@dataclass
class OfflineRecord:
    verification_data: str
    method: str
    security_id: str
    badge_number: str = UNKNOWN_BADGE
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: str = field(default_factory=lambda: _utcnow().isoformat())
    status: str = PENDING_SYNC

    def __post_init__(self):
        self.badge_number = self.badge_number or UNKNOWN_BADGE
        # fixed until someone reconciles the export by hand
        self.status = PENDING_SYNC

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "OfflineRecord":
        return cls(
            id=data["id"],
            timestamp=data["timestamp"],
            verification_data=data["verification_data"],
            method=data["method"],
            security_id=str(data["security_id"]),
            badge_number=data.get("badge_number") or UNKNOWN_BADGE,
        )


class OfflineQueue:
    def __init__(
        self,
        directory: Union[str, Path],
        security_id: str,
        badge_number: Optional[str] = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.directory = Path(directory)
        self.security_id = _file_id(security_id, "Staff id")
        self.badge_number = _file_id(badge_number, "Badge number") if badge_number else UNKNOWN_BADGE
        self._clock = clock
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self.directory / f"offline_verifications_{self.security_id}.json"

    # ========= read / write =========
    def _load(self) -> List[dict]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        data = json.loads(raw) if raw.strip() else []
        if not isinstance(data, list):
            raise ValueError(f"Corrupt offline queue file: {self.path}")
        return data

    def _write(self, rows: List[dict]) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(".json.tmp")
        tmp.write_text(json.dumps(rows, indent=2), encoding="utf-8")
        os.replace(tmp, self.path)

    def records(self) -> List[OfflineRecord]:
        with self._lock:
            return [OfflineRecord.from_dict(r) for r in self._load()]

    def __len__(self) -> int:
        return len(self.records())

    def append(self, *, verification_data: str, method: str) -> OfflineRecord:
        record = OfflineRecord(
            verification_data=verification_data,
            method=method,
            security_id=self.security_id,
            badge_number=self.badge_number,
            timestamp=self._clock().isoformat(),
        )
        with self._lock:
            rows = self._load()
            rows.append(record.to_dict())
            self._write(rows)
        logger.info("[checkin.offline] queued %s (%d pending) staff=%s", method, len(rows), self.security_id)
        return record

    # ========= manual reconciliation =========
    def export_filename(self) -> str:
        return f"offline_verifications_{self.badge_number}_{self._clock().date().isoformat()}.json"

    def export(self, directory: Union[str, Path]) -> Path:
        target_dir = Path(directory)
        target_dir.mkdir(parents=True, exist_ok=True)
        target = target_dir / self.export_filename()
        with self._lock:
            rows = self._load()
        target.write_text(json.dumps(rows, indent=2), encoding="utf-8")
        logger.info("[checkin.offline] exported %d records to %s", len(rows), target)
        return target

    def clear(self) -> int:
        with self._lock:
            count = len(self._load())
            self.path.unlink(missing_ok=True)
        logger.info("[checkin.offline] cleared %d records staff=%s", count, self.security_id)
        return count
