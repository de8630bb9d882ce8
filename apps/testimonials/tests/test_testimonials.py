import pytest
from django.urls import reverse

from apps.testimonials.models import Testimonial, DEFAULT_AVATAR


pytestmark = pytest.mark.django_db


class TestTestimonials:

    def test_public_list_is_visible_only_and_capped(self, api_client, testimonial_factory):
        testimonial_factory.create_batch(12)
        hidden = testimonial_factory(visible=False)

        response = api_client.get(reverse("testimonials"))

        assert response.status_code == 200
        assert len(response.data) == 10
        assert hidden.pk not in [t["id"] for t in response.data]

    def test_public_list_is_newest_first(self, api_client, testimonial_factory):
        first = testimonial_factory()
        second = testimonial_factory()

        response = api_client.get(reverse("testimonials"))

        assert [t["id"] for t in response.data] == [second.pk, first.pk]

    def test_create_starts_hidden(self, api_client):
        response = api_client.post(
            reverse("testimonials"),
            {"name": "Grace", "role": "Client", "quote": "Great", "rating": 5, "visible": True},
            format="json",
        )

        assert response.status_code == 201
        assert response.data["message"] == "Thank you for your feedback!"

        testimonial = Testimonial.objects.get()
        assert testimonial.visible is False
        assert testimonial.avatar == DEFAULT_AVATAR

    def test_missing_fields(self, api_client):
        response = api_client.post(reverse("testimonials"), {"name": "Grace"}, format="json")

        assert response.status_code == 400
        assert response.data["message"] == "All fields are required."
        assert Testimonial.objects.count() == 0

    @pytest.mark.parametrize("rating", [0, 6])
    def test_rating_range(self, api_client, rating):
        response = api_client.post(
            reverse("testimonials"),
            {"name": "Grace", "role": "Client", "quote": "Great", "rating": rating},
            format="json",
        )

        assert response.status_code == 400
        assert "rating" in response.data["errors"]
