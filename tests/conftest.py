"""
Shared fixtures.

The evaluator tests need no database; anything touching MemberProfile,
purchases or the HTTP views asks for `db` (directly or through `member`).
"""

import pytest

from gating.course_map import CourseLocator
from gating.flags import UserFlags
from gating.roles import Role


@pytest.fixture
def make_flags():
    def _make(role=Role.TRIAL, **kwargs):
        return UserFlags(role=role, **kwargs)

    return _make


@pytest.fixture
def s1():
    def _locator(index):
        return CourseLocator("s1", index, course_id=f"s1-course-{index}")

    return _locator


@pytest.fixture
def s2_course():
    return CourseLocator("s2", course_id="tiktok-mastery")


@pytest.fixture
def masterclass():
    return CourseLocator("s3", course_id="copywriting-masterclass")


@pytest.fixture
def member(db, django_user_model):
    return django_user_model.objects.create_user(username="member", password="pw")


@pytest.fixture
def staff(db, django_user_model):
    return django_user_model.objects.create_user(username="staff", password="pw", is_staff=True)


@pytest.fixture
def dev_tools(settings):
    settings.GATING_DEV_TOOLS = True
    return settings
