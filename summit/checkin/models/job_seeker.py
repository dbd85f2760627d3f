from django.conf import settings
from django.db import models
from django.utils import timezone
from .mixins import TimeStampedModel


class JobSeeker(TimeStampedModel):
    class RegistrationStatus(models.TextChoices):
        PENDING = "pending", "Pending"
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="job_seeker")

    # check-in credentials
    pin = models.CharField(max_length=6, unique=True)
    ticket_number = models.CharField(max_length=32, unique=True)
    pin_generated_at = models.DateTimeField(default=timezone.now)
    pin_expires_at = models.DateTimeField(null=True, blank=True)

    registration_status = models.CharField(
        max_length=16, choices=RegistrationStatus.choices,
        default=RegistrationStatus.PENDING, db_index=True,
    )
    decided_by = models.IntegerField(null=True, blank=True)
    decided_at = models.DateTimeField(null=True, blank=True)
    decision_reason = models.CharField(max_length=255, blank=True, default="")

    # profile
    bio = models.TextField(blank=True, default="")
    cv_url = models.URLField(max_length=500, blank=True, default="")
    skills = models.JSONField(default=list, blank=True)
    education = models.TextField(blank=True, default="")
    experience = models.TextField(blank=True, default="")
    interest_categories = models.JSONField(default=list, blank=True)
    linkedin_url = models.URLField(max_length=300, blank=True, default="")
    portfolio_url = models.URLField(max_length=300, blank=True, default="")
    expected_salary = models.CharField(max_length=64, blank=True, default="")
    available_from = models.DateField(null=True, blank=True)

    class Meta:
        db_table = "JobSeeker"
        indexes = [
            models.Index(fields=["registration_status", "created_at"]),
        ]

    def __str__(self):
        return f"{self.full_name} [{self.ticket_number}]"

    @property
    def full_name(self) -> str:
        return self.user.get_full_name() or self.user.get_username()

    def pin_expired(self, now=None) -> bool:
        if self.pin_expires_at is None:
            return False
        return (now or timezone.now()) > self.pin_expires_at
