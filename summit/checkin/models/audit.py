from django.db import models
from .mixins import TimeStampedModel


class AuditLog(TimeStampedModel):
    """Admin / system actions: registration decisions, PIN re-issue, event switches, incident reports."""
    actor = models.IntegerField(null=True, blank=True, db_index=True, help_text="User id; empty for system actions")
    action = models.CharField(max_length=64, help_text="e.g. job_seeker.decide, event.activate")
    object_type = models.CharField(max_length=64)
    object_id = models.CharField(max_length=64)
    before = models.JSONField(null=True, blank=True)
    after = models.JSONField(null=True, blank=True)
    success = models.BooleanField(default=True, db_index=True)
    ip = models.GenericIPAddressField(null=True, blank=True)

    class Meta:
        db_table = "AuditLog"
        ordering = ["-created_at", "-id"]
        indexes = [
            models.Index(fields=["object_type", "object_id"]),
            models.Index(fields=["action", "created_at"]),
        ]

    def __str__(self):
        outcome = "ok" if self.success else "failed"
        return f"[{outcome}] {self.action} on {self.object_type}:{self.object_id} (actor={self.actor or 'system'})"
