"""JSON endpoints."""

import pytest
from django.urls import reverse

from gating.models import LessonCompletion, MasterclassPurchase, MemberProfile
from gating.roles import Role

pytestmark = pytest.mark.django_db


@pytest.fixture
def member_client(client, member):
    client.force_login(member)
    return client


def _set_role(user, role):
    MemberProfile.objects.filter(user=user).update(role=role)


class TestCatalog:
    def test_anonymous_sees_every_section(self, client):
        response = client.get(reverse("gating:catalog"))
        assert response.status_code == 200
        data = response.json()
        assert data["flags"]["role"] == "free"
        assert [s["id"] for s in data["sections"]] == ["s1", "s2", "s3"]

        decisions = {c["course_id"]: c["decision"] for s in data["sections"] for c in s["courses"]}
        assert decisions["business-launch-blueprint"] == "unlocked"
        assert decisions["discovery-process"] == "locked-progress"
        assert decisions["next-steps"] == "locked-upgrade"
        assert decisions["tiktok-mastery"] == "locked-upgrade"
        assert decisions["copywriting-masterclass"] == "locked-purchase"

    def test_premium_member(self, member_client, member):
        _set_role(member, Role.ANNUAL)
        data = member_client.get(reverse("gating:catalog")).json()
        section2 = next(s for s in data["sections"] if s["id"] == "s2")
        assert all(c["decision"] == "unlocked" for c in section2["courses"])


class TestCourseAccess:
    def test_locked_course_payload(self, member_client):
        response = member_client.get(reverse("gating:course_access", args=["next-steps"]))
        data = response.json()
        assert response.status_code == 200
        assert data["decision"] == "locked-upgrade"
        assert data["section"] == "s1"
        assert data["section_name"] == "Start Here"
        assert data["message"]
        assert data["banner"]["show_upgrade_cta"]

    def test_alias_resolves(self, member_client):
        data = member_client.get(reverse("gating:course_access", args=["facebook-advertising"])).json()
        assert data["course_id"] == "facebook-ads"

    def test_unknown_course_is_denied(self, member_client):
        response = member_client.get(reverse("gating:course_access", args=["mystery-course"]))
        assert response.status_code == 404
        data = response.json()
        assert data["decision"] == "locked-upgrade"
        assert data["can_start"] is False

    def test_purchased_masterclass(self, member_client, member):
        MasterclassPurchase.objects.create(user=member, course_id="sales-masterclass")
        data = member_client.get(reverse("gating:course_access", args=["sales-masterclass"])).json()
        assert data["decision"] == "unlocked"
        assert data["can_start"] is True


class TestLessons:
    def test_lesson_access_uses_recorded_progress(self, member_client, member):
        LessonCompletion.objects.create(user=member, course_id="business-launch-blueprint", lesson_index=1)
        url = reverse("gating:lesson_access", args=["business-blueprint", 2])
        data = member_client.get(url).json()
        assert data["lesson_unlocked"] is True
        assert data["prior_lessons_completed"] == 1

        data = member_client.get(reverse("gating:lesson_access", args=["business-blueprint", 3])).json()
        assert data["lesson_unlocked"] is False

    def test_unknown_course_lesson(self, client):
        response = client.get(reverse("gating:lesson_access", args=["mystery-course", 1]))
        assert response.status_code == 404

    def test_complete_lesson(self, member_client):
        url = reverse("gating:lesson_complete", args=["business-launch-blueprint", 1])
        response = member_client.post(url)
        assert response.status_code == 200
        assert response.json()["prior_lessons_completed"] == 1

    def test_complete_locked_lesson_is_forbidden(self, member_client):
        url = reverse("gating:lesson_complete", args=["discovery-process", 1])
        response = member_client.post(url)
        assert response.status_code == 403
        assert response.json()["error"] == "lesson_locked"

    def test_complete_requires_login(self, client):
        url = reverse("gating:lesson_complete", args=["business-launch-blueprint", 1])
        response = client.post(url)
        assert response.status_code == 302
        assert not LessonCompletion.objects.exists()

    def test_get_not_allowed(self, member_client):
        url = reverse("gating:lesson_complete", args=["business-launch-blueprint", 1])
        assert member_client.get(url).status_code == 405


class TestFlags:
    def test_not_ready_unlocks_discovery_first_lesson_only(self, member_client):
        response = member_client.post(reverse("gating:not_ready"))
        assert response.json()["changed"] is True
        assert response.json()["flags"]["pressed_not_ready"] is True

        first = member_client.get(reverse("gating:lesson_access", args=["discovery-process", 1])).json()
        second = member_client.get(reverse("gating:lesson_access", args=["discovery-process", 2])).json()
        assert first["lesson_unlocked"] is True
        assert second["lesson_unlocked"] is False

    def test_course_complete_sets_blueprint(self, member_client):
        for lesson in (1, 2, 3):
            url = reverse("gating:lesson_complete", args=["business-blueprint", lesson])
            assert member_client.post(url).status_code == 200

        response = member_client.post(reverse("gating:course_complete", args=["business-blueprint"]))
        assert response.status_code == 200
        assert response.json()["flags"]["blueprint_done"] is True

    def test_early_course_complete_is_forbidden(self, member_client, member):
        member_client.post(reverse("gating:lesson_complete", args=["business-blueprint", 1]))

        response = member_client.post(reverse("gating:course_complete", args=["business-launch-blueprint"]))
        assert response.status_code == 403
        assert response.json() == {
            "error": "course_incomplete",
            "course_id": "business-launch-blueprint",
            "lessons_completed": 1,
            "lessons_required": 3,
        }
        assert not MemberProfile.objects.get(user=member).blueprint_done

        data = member_client.get(reverse("gating:course_access", args=["discovery-process"])).json()
        assert data["decision"] == "locked-progress"

    def test_course_complete_unknown_course(self, member_client):
        response = member_client.post(reverse("gating:course_complete", args=["mystery-course"]))
        assert response.status_code == 404


class TestDevTools:
    def test_hidden_when_disabled(self, client, staff, settings):
        settings.GATING_DEV_TOOLS = False
        client.force_login(staff)
        assert client.post(reverse("gating:dev_flags"), {"role": "admin"}).status_code == 404

    def test_hidden_from_members_when_disabled(self, member_client, settings):
        settings.GATING_DEV_TOOLS = False
        assert member_client.post(reverse("gating:dev_flags"), {"role": "admin"}).status_code == 404
        assert member_client.post(reverse("gating:dev_reset")).status_code == 404

    def test_hidden_from_anonymous_when_disabled(self, client, settings):
        settings.GATING_DEV_TOOLS = False
        assert client.post(reverse("gating:dev_flags"), {"role": "admin"}).status_code == 404

    def test_staff_only(self, member_client, dev_tools):
        response = member_client.post(reverse("gating:dev_flags"), {"role": "admin"})
        assert response.status_code == 404
        assert "dev.role" not in member_client.session

    def test_role_switch_overrides_flags(self, client, staff, dev_tools):
        client.force_login(staff)
        response = client.post(
            reverse("gating:dev_flags"),
            {"role": "monthly", "purchased_masterclasses": "sales-masterclass, email-masterclass"},
        )
        assert response.status_code == 200
        assert response.json()["flags"]["purchased_masterclasses"] == ["email-masterclass", "sales-masterclass"]

        data = client.get(reverse("gating:course_access", args=["tiktok-mastery"])).json()
        assert data["decision"] == "unlocked"

        client.post(reverse("gating:dev_reset"))
        data = client.get(reverse("gating:course_access", args=["tiktok-mastery"])).json()
        assert data["decision"] == "locked-upgrade"

    def test_invalid_override(self, client, staff, dev_tools):
        client.force_login(staff)
        response = client.post(
            reverse("gating:dev_flags"),
            {"role": "superuser", "purchased_masterclasses": "tiktok-mastery"},
        )
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert "role" in errors
        assert "purchased_masterclasses" in errors
