from datetime import timedelta

import pytest
from django.urls import reverse
from django.utils import timezone

from apps.adminpanel.selectors import user_stats
from apps.notifications.models import Notification
from apps.projects.models import Project


pytestmark = pytest.mark.django_db


@pytest.fixture
def admin_api(auth_client, admin_account):
    return auth_client(admin_account)


class TestAccess:

    @pytest.mark.parametrize("name", [
        "admin-users", "admin-user-stats", "admin-projects", "admin-applicants", "admin-testimonials",
    ])
    def test_non_admins_are_forbidden(self, auth_client, freelancer, name):
        response = auth_client(freelancer).get(reverse(name))

        assert response.status_code == 403
        assert response.data == {"message": "Access denied. Admin privileges required."}

    def test_anonymous_is_unauthorized(self, api_client):
        assert api_client.get(reverse("admin-users")).status_code == 401


class TestUsers:

    def test_list_and_filters(self, admin_api, freelancer_factory, client_factory):
        freelancer_factory(name="Alan Turing")
        client_factory(name="Acme Buyer")

        everyone = admin_api.get(reverse("admin-users"))
        freelancers = admin_api.get(reverse("admin-users"), {"role": "Freelancer"})
        search = admin_api.get(reverse("admin-users"), {"search": "turing"})

        assert len(everyone.data) == 3
        assert all("password" not in row for row in everyone.data)
        assert [row["name"] for row in freelancers.data] == ["Alan Turing"]
        assert [row["name"] for row in search.data] == ["Alan Turing"]


class TestStats:

    def test_rollup(self, user_factory, freelancer_factory, client_factory, admin_account):
        now = timezone.now()
        freelancer_factory()
        freelancer_factory(created_at=now - timedelta(days=3))
        client_factory(created_at=now - timedelta(days=20))
        client_factory(created_at=now - timedelta(days=40))

        stats = user_stats(now=now)

        assert stats["total"] == 5
        assert stats["freelancers"] == 2
        assert stats["clients"] == 2
        assert stats["admins"] == 1
        assert stats["recent7Days"] == 3
        assert stats["recent30Days"] == 4

        daily = stats["dailyStats"]
        assert len(daily) == 7
        assert daily[-1]["date"] == timezone.localdate(now).isoformat()
        assert daily[-1] == {
            "date": daily[-1]["date"], "freelancers": 1, "clients": 0, "total": 1,
        }
        assert daily[-4]["freelancers"] == 1
        assert sum(day["total"] for day in daily) == 2

    def test_endpoint(self, admin_api):
        response = admin_api.get(reverse("admin-user-stats"))

        assert response.status_code == 200
        assert response.data["admins"] == 1
        assert len(response.data["dailyStats"]) == 7


class TestProjectsAndApplicants:

    def test_projects_show_owner_email(self, admin_api, project):
        response = admin_api.get(reverse("admin-projects"))

        assert response.data[0]["createdBy"] == {
            "id": project.client_id, "name": project.client.name, "email": project.client.email,
        }

    def test_feature_toggle(self, admin_api, project):
        response = admin_api.patch(
            reverse("admin-project-featured", args=[project.pk]), {"featured": True}, format="json"
        )

        assert response.status_code == 200
        assert response.data["featured"] is True
        assert Project.objects.get(pk=project.pk).featured is True

    def test_feature_unknown_project(self, admin_api):
        response = admin_api.patch(
            reverse("admin-project-featured", args=[999]), {"featured": True}, format="json"
        )

        assert response.status_code == 404

    def test_applicants_are_flattened_newest_first(self, admin_api, project, applicant_factory):
        now = timezone.now()
        old = applicant_factory(project=project, applied_at=now - timedelta(days=1))
        new = applicant_factory(applied_at=now)

        response = admin_api.get(reverse("admin-applicants"))

        assert [row["id"] for row in response.data] == [new.pk, old.pk]
        assert response.data[1]["project"]["id"] == project.pk
        assert response.data[1]["project"]["title"] == "Landing page"

    def test_applicant_override(self, admin_api, applicant_factory):
        applicant = applicant_factory(status="rejected")

        response = admin_api.patch(
            reverse("admin-applicant-status", args=[applicant.project_id, applicant.pk]),
            {"status": "pending"},
            format="json",
        )

        assert response.status_code == 200
        assert response.data["applicant"]["status"] == "pending"
        assert Notification.objects.count() == 0

    def test_applicant_override_rejects_unknown_status(self, admin_api, applicant_factory):
        applicant = applicant_factory()

        response = admin_api.patch(
            reverse("admin-applicant-status", args=[applicant.project_id, applicant.pk]),
            {"status": "hired"},
            format="json",
        )

        assert response.status_code == 400
        assert response.data == {"message": "Invalid status value."}


class TestTestimonialModeration:

    def test_list_includes_hidden(self, admin_api, testimonial_factory):
        testimonial_factory(visible=False)
        testimonial_factory()

        response = admin_api.get(reverse("admin-testimonials"))

        assert len(response.data) == 2

    def test_visibility_toggle(self, admin_api, api_client, testimonial_factory):
        testimonial = testimonial_factory(visible=False)

        response = admin_api.patch(
            reverse("admin-testimonial-visibility", args=[testimonial.pk]),
            {"visible": True},
            format="json",
        )

        assert response.status_code == 200
        assert response.data["message"] == "Testimonial visibility updated."
        public = api_client.get(reverse("testimonials"))
        assert [t["id"] for t in public.data] == [testimonial.pk]

    def test_unknown_testimonial(self, admin_api):
        response = admin_api.patch(
            reverse("admin-testimonial-visibility", args=[999]), {"visible": True}, format="json"
        )

        assert response.status_code == 404
        assert response.data == {"message": "Testimonial not found."}
