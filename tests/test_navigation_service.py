import pytest

from hirrd.domain.enums import UserRole
from hirrd.domain.models import UserProfile
from hirrd.services.navigation_service import build_header


def test_recruiter_can_post_jobs():
    header = build_header(UserProfile(id="r", role="recruiter"))

    assert header.role is UserRole.RECRUITER
    assert [(a.label, a.href) for a in header.actions] == [("Post a Job", "/post-job")]
    assert [m.label for m in header.menu] == ["My Jobs", "Saved Jobs"]


@pytest.mark.parametrize("role", ["candidate", "Candidate"])
def test_candidate_sees_applications(role):
    header = build_header(UserProfile(id="c", role=role))

    assert header.role is UserRole.CANDIDATE
    assert header.actions == []
    assert [m.label for m in header.menu] == ["My Applications", "Saved Jobs"]


@pytest.mark.parametrize("role", [None, "admin"])
def test_unknown_or_missing_role(role):
    header = build_header(UserProfile(id="x", role=role))

    assert header.role is None
    assert header.actions == []
    assert header.menu[0].label == "My Jobs"
