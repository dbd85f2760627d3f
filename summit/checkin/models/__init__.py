# Load every model into the checkin.models namespace
from .mixins import TimeStampedModel

from .event import Event
from .job_seeker import JobSeeker
from .attendance import AttendanceRecord, AppendOnlyError
from .incident import SecurityIncident
from .notification import Notification
from .audit import AuditLog

__all__ = [
    "TimeStampedModel",
    "Event",
    "JobSeeker",
    "AttendanceRecord", "AppendOnlyError",
    "SecurityIncident",
    "Notification",
    "AuditLog",
]
