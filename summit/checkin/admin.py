from django.contrib import admin
from .models import Event, JobSeeker, AttendanceRecord, SecurityIncident, Notification, AuditLog


@admin.register(Event)
class EventAdmin(admin.ModelAdmin):
    list_display = ("name", "venue", "start_date", "end_date", "is_active")
    list_filter = ("is_active",)
    search_fields = ("name", "venue")


@admin.register(JobSeeker)
class JobSeekerAdmin(admin.ModelAdmin):
    list_display = ("ticket_number", "user", "registration_status", "pin_expires_at", "created_at")
    list_filter = ("registration_status",)
    search_fields = ("ticket_number", "user__username", "user__email")
    exclude = ("pin",)


@admin.register(AttendanceRecord)
class AttendanceRecordAdmin(admin.ModelAdmin):
    list_display = ("job_seeker", "event", "verification_method", "status", "verified_badge", "check_in_time", "notes")
    list_filter = ("verification_method", "status", "event")
    search_fields = ("job_seeker__ticket_number", "verification_data", "verified_badge")

    # audit trail: view only
    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(SecurityIncident)
class SecurityIncidentAdmin(admin.ModelAdmin):
    list_display = ("incident_type", "severity", "location", "reporter_badge", "created_at")
    list_filter = ("incident_type", "severity")
    search_fields = ("location", "description")


@admin.register(Notification)
class NotificationAdmin(admin.ModelAdmin):
    list_display = ("channel", "title", "to_user", "delivered", "created_at")
    list_filter = ("channel", "delivered")


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ("action", "object_type", "object_id", "actor", "success", "created_at")
    list_filter = ("action", "success")
