from django.conf import settings
from django.db import models
from .mixins import TimeStampedModel


class SecurityIncident(TimeStampedModel):
    class IncidentType(models.TextChoices):
        UNAUTHORIZED_ACCESS = "unauthorized_access", "Unauthorized access"
        SUSPICIOUS_ACTIVITY = "suspicious_activity", "Suspicious activity"
        EMERGENCY = "emergency", "Emergency"
        TECHNICAL_ISSUE = "technical_issue", "Technical issue"
        OTHER = "other", "Other"

    class Severity(models.TextChoices):
        LOW = "low", "Low"
        MEDIUM = "medium", "Medium"
        HIGH = "high", "High"
        CRITICAL = "critical", "Critical"

    reported_by = models.ForeignKey(
        settings.AUTH_USER_MODEL, null=True, blank=True,
        on_delete=models.SET_NULL, related_name="reported_incidents",
    )
    reporter_badge = models.CharField(max_length=32, blank=True, default="")

    incident_type = models.CharField(max_length=32, choices=IncidentType.choices)
    severity = models.CharField(max_length=16, choices=Severity.choices, db_index=True)
    location = models.CharField(max_length=200)
    description = models.TextField()
    involved_persons = models.JSONField(default=list, blank=True)
    action_taken = models.TextField(blank=True, default="")

    class Meta:
        db_table = "SecurityIncident"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["incident_type", "severity"]),
        ]

    def __str__(self):
        return f"[{self.severity}] {self.get_incident_type_display()} @ {self.location}"
