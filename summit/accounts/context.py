# -*- coding: utf-8 -*-
"""
Request-scoped actor context.

Built once per request from the authenticated user and passed explicitly
to every service call:

    actor = build_actor_context(request)
    verify_by_pin(pin, actor=actor)
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import FrozenSet, Optional

from accounts.models import UserProfile, SecurityPersonnel

# ========= Capabilities =========
CHECKIN_VERIFY = "checkin.verify"
CHECKIN_OFFLINE = "checkin.offline"
INCIDENT_REPORT = "incident.report"
REGISTRATION_REVIEW = "registration.review"
REPORTS_VIEW = "reports.view"
EVENTS_MANAGE = "events.manage"
EMPLOYER_VIEW = "employer.view"
PROFILE_MANAGE = "profile.manage"

ALL_CAPABILITIES = frozenset({
    CHECKIN_VERIFY, CHECKIN_OFFLINE, INCIDENT_REPORT,
    REGISTRATION_REVIEW, REPORTS_VIEW, EVENTS_MANAGE,
    EMPLOYER_VIEW, PROFILE_MANAGE,
})

ROLE_CAPABILITIES = {
    UserProfile.Role.SECURITY: frozenset({CHECKIN_VERIFY, CHECKIN_OFFLINE, INCIDENT_REPORT}),
    UserProfile.Role.ADMIN: ALL_CAPABILITIES,
    UserProfile.Role.EMPLOYER: frozenset({EMPLOYER_VIEW}),
    UserProfile.Role.JOB_SEEKER: frozenset({PROFILE_MANAGE}),
}


@dataclass(frozen=True)
class ActorContext:
    user_id: Optional[int]
    role: Optional[str] = None
    badge_number: Optional[str] = None
    capabilities: FrozenSet[str] = field(default_factory=frozenset)

    def can(self, capability: str) -> bool:
        return capability in self.capabilities

    @property
    def is_admin(self) -> bool:
        return self.role == UserProfile.Role.ADMIN

    @property
    def staff_key(self) -> str:
        """Identifier used for the verifying-staff columns and offline queue files."""
        return self.badge_number or (str(self.user_id) if self.user_id is not None else "UNKNOWN")


ANONYMOUS = ActorContext(user_id=None)


def capabilities_for_role(role: Optional[str]) -> FrozenSet[str]:
    return ROLE_CAPABILITIES.get(role, frozenset())


def actor_for_user(user) -> ActorContext:
    if user is None or not getattr(user, "is_authenticated", False):
        return ANONYMOUS

    profile = UserProfile.objects.filter(user_id=user.pk).first()
    role = profile.role if profile else None
    if role is None and user.is_superuser:
        role = UserProfile.Role.ADMIN

    badge = (
        SecurityPersonnel.objects
        .filter(user_id=user.pk, is_active=True)
        .values_list("badge_number", flat=True)
        .first()
    )
    return ActorContext(
        user_id=user.pk,
        role=role,
        badge_number=badge,
        capabilities=capabilities_for_role(role),
    )


def build_actor_context(request) -> ActorContext:
    # cache on the request so permission checks and the view share one lookup
    cached = getattr(request, "_actor_context", None)
    if cached is not None:
        return cached
    actor = actor_for_user(getattr(request, "user", None))
    request._actor_context = actor
    return actor
