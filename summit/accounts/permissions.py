from rest_framework import permissions

from accounts.context import build_actor_context


class HasCapability(permissions.BasePermission):
    """
    Grants access when the actor holds ``view.required_capability``.
    Views without the attribute only need an authenticated user.
    """
    message = "You do not have permission to perform this action."

    def has_permission(self, request, view):
        if not (request.user and request.user.is_authenticated):
            return False
        required = getattr(view, "required_capability", None)
        if not required:
            return True
        return build_actor_context(request).can(required)
