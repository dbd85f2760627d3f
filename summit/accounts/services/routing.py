# -*- coding: utf-8 -*-
"""
Landing path after login, by role and profile completeness.
"""
from __future__ import annotations
from typing import Optional

from accounts.models import UserProfile

DEFAULT_LANDING = "/profile-setup"

# role -> (setup path, home path)
_ROLE_PATHS = {
    UserProfile.Role.EMPLOYER: ("/employer/setup", "/employer"),
    UserProfile.Role.SECURITY: ("/security/setup", "/security"),
    UserProfile.Role.JOB_SEEKER: ("/profile-setup", "/dashboard"),
}


def resolve_landing_path(profile: Optional[UserProfile]) -> str:
    if profile is None:
        return DEFAULT_LANDING
    if profile.role == UserProfile.Role.ADMIN:
        return "/admin"
    paths = _ROLE_PATHS.get(profile.role)
    if paths is None:
        return DEFAULT_LANDING
    setup, home = paths
    return home if profile.profile_complete else setup


def landing_for_user(user) -> str:
    profile = UserProfile.objects.filter(user_id=user.pk).first()
    if profile is None and user.is_superuser:
        return "/admin"
    return resolve_landing_path(profile)
