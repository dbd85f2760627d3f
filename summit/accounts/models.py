from django.conf import settings
from django.db import models


class UserProfile(models.Model):
    class Role(models.TextChoices):
        JOB_SEEKER = "job_seeker", "Job seeker"
        EMPLOYER = "employer", "Employer"
        SECURITY = "security", "Security"
        ADMIN = "admin", "Admin"

    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="profile")
    role = models.CharField(max_length=16, choices=Role.choices, default=Role.JOB_SEEKER, db_index=True)
    phone_number = models.CharField(max_length=32, blank=True, default="")
    profile_complete = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "UserProfile"

    def __str__(self):
        return f"{self.user} ({self.role})"


class SecurityPersonnel(models.Model):
    user = models.OneToOneField(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name="security_personnel")
    badge_number = models.CharField(max_length=32, unique=True)
    assigned_area = models.CharField(max_length=120, blank=True, default="")
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "SecurityPersonnel"
        verbose_name_plural = "Security personnel"

    def __str__(self):
        return f"{self.badge_number} - {self.user}"
