"""
Header navigation for the signed-in user, derived from their role.
"""

from typing import Any

from hirrd.domain.enums import UserRole
from hirrd.domain.models import HeaderView, NavLink, UserProfile


def _parse_role(raw: Any) -> UserRole | None:
    if raw is None:
        return None
    try:
        return UserRole(str(raw).lower())
    except ValueError:
        return None


def build_header(user: UserProfile) -> HeaderView:
    """
    Recruiters get a "Post a Job" action. The first menu entry is
    "My Applications" for candidates and "My Jobs" for everyone else.
    """
    role = _parse_role(user.role)

    actions: list[NavLink] = []
    if role is UserRole.RECRUITER:
        actions.append(NavLink(label="Post a Job", href="/post-job", icon="pen-box"))

    my_jobs_label = "My Applications" if role is UserRole.CANDIDATE else "My Jobs"
    menu = [
        NavLink(label=my_jobs_label, href="/my-jobs", icon="briefcase-business"),
        NavLink(label="Saved Jobs", href="/saved-job", icon="heart"),
    ]

    return HeaderView(role=role, actions=actions, menu=menu)
