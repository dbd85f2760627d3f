from django.conf import settings
from django.db import models
from django.utils import timezone


class AppendOnlyError(Exception):
    """Raised when something tries to change or remove an attendance audit row."""


class AttendanceRecordQuerySet(models.QuerySet):
    def update(self, **kwargs):
        raise AppendOnlyError("Attendance records cannot be updated.")

    def delete(self):
        raise AppendOnlyError("Attendance records cannot be deleted.")


class AttendanceRecord(models.Model):
    """
    One row per verification attempt, duplicates included.
    Reports read method / verification_data / status / notes / check_in_time.
    """
    class Method(models.TextChoices):
        PIN = "pin", "PIN"
        TICKET_NUMBER = "ticket_number", "Ticket number"
        QR_CODE = "qr_code", "QR code"

    class Status(models.TextChoices):
        CHECKED_IN = "checked_in", "Checked in"
        CHECKED_OUT = "checked_out", "Checked out"
        FLAGGED = "flagged", "Flagged"

    job_seeker = models.ForeignKey("checkin.JobSeeker", on_delete=models.PROTECT, related_name="attendance_records")
    event = models.ForeignKey("checkin.Event", on_delete=models.PROTECT, related_name="attendance_records")

    verified_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True,
        on_delete=models.PROTECT, related_name="verified_attendance",
    )
    verified_badge = models.CharField(max_length=32, blank=True, default="")

    verification_method = models.CharField(max_length=16, choices=Method.choices)
    verification_data = models.CharField(max_length=64)
    status = models.CharField(max_length=16, choices=Status.choices, default=Status.CHECKED_IN, db_index=True)
    check_in_time = models.DateTimeField(default=timezone.now, db_index=True)
    notes = models.CharField(max_length=255, blank=True, default="")

    created_at = models.DateTimeField(auto_now_add=True)

    objects = AttendanceRecordQuerySet.as_manager()

    class Meta:
        db_table = "AttendanceRecord"
        ordering = ["-check_in_time"]
        indexes = [
            models.Index(fields=["job_seeker", "status"]),
            models.Index(fields=["event", "check_in_time"]),
        ]

    def __str__(self):
        return f"{self.job_seeker_id} {self.status} via {self.verification_method} @ {self.check_in_time:%Y-%m-%d %H:%M}"

    def save(self, *args, **kwargs):
        if not self._state.adding:
            raise AppendOnlyError("Attendance records cannot be updated.")
        super().save(*args, **kwargs)

    def delete(self, *args, **kwargs):
        raise AppendOnlyError("Attendance records cannot be deleted.")
