from checkin.models import AuditLog

def log_action(*, actor, action: str, object_type: str, object_id, before=None, after=None, success: bool = True, ip=None):
    """``actor`` is an ActorContext, a user id, or None for system actions."""
    actor_id = getattr(actor, "user_id", actor)
    return AuditLog.objects.create(
        actor=actor_id, action=action, object_type=object_type, object_id=str(object_id),
        before=before, after=after, success=success, ip=ip,
    )
