from datetime import timedelta
from smtplib import SMTPException
from unittest.mock import patch, MagicMock

import pytest
from django.core import mail
from django.urls import reverse
from django.utils import timezone
from rest_framework_simplejwt.tokens import AccessToken

from apps.users.models import User


pytestmark = pytest.mark.django_db


def signup_payload(**overrides):
    payload = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "password": "secret123",
        "role": "Freelancer",
        "groupName": "Analytical",
        "skills": ["Python", "Math", "Python"],
        "social": {"github": "https://github.com/ada"},
    }
    payload.update(overrides)
    return payload


class TestSignup:

    def test_freelancer_signup_creates_profile(self, api_client):
        response = api_client.post(reverse("signup"), signup_payload(), format="json")

        assert response.status_code == 201
        assert response.data == {"message": "Signup successful. Please log in."}

        user = User.objects.get(email="ada@example.com")
        assert user.role == "Freelancer"
        assert user.group_name == "Analytical"
        assert user.check_password("secret123")
        assert user.password != "secret123"
        assert user.freelancer_profile.skills == ["Python", "Math"]
        assert user.freelancer_profile.github == "https://github.com/ada"

    def test_client_signup_has_no_freelancer_payload(self, api_client):
        response = api_client.post(
            reverse("signup"), signup_payload(role="Client", email="c@example.com"), format="json"
        )

        assert response.status_code == 201
        user = User.objects.get(email="c@example.com")
        assert not hasattr(user, "freelancer_profile")

    def test_duplicate_email_is_rejected(self, api_client, freelancer_factory):
        freelancer_factory(email="ada@example.com")

        response = api_client.post(reverse("signup"), signup_payload(), format="json")

        assert response.status_code == 400
        assert response.data["message"] == "User already exists"
        assert User.objects.filter(email="ada@example.com").count() == 1

    def test_admin_role_cannot_self_register(self, api_client):
        response = api_client.post(reverse("signup"), signup_payload(role="Admin"), format="json")

        assert response.status_code == 400
        assert "role" in response.data["errors"]
        assert not User.objects.filter(email="ada@example.com").exists()

    def test_captcha_failure_blocks_signup(self, api_client, settings):
        settings.RECAPTCHA_SECRET_KEY = "secret"
        fake = MagicMock()
        fake.json.return_value = {"success": False}

        with patch("apps.cores.captcha.requests.post", return_value=fake) as post:
            response = api_client.post(
                reverse("signup"), signup_payload(captchaToken="bad"), format="json"
            )

        assert post.called
        assert response.status_code == 400
        assert response.data["message"] == "reCAPTCHA verification failed"
        assert not User.objects.filter(email="ada@example.com").exists()


class TestLogin:

    def test_login_returns_token_with_role_claim(self, api_client, freelancer_factory):
        user = freelancer_factory(email="f@example.com")

        response = api_client.post(
            reverse("login"), {"email": "f@example.com", "password": "testpass123"}, format="json"
        )

        assert response.status_code == 200
        assert response.data["message"] == "Login successful"
        assert response.data["user"] == {
            "id": user.id, "email": user.email, "name": user.name, "role": "Freelancer",
        }
        token = AccessToken(response.data["token"])
        assert token["role"] == "Freelancer"
        assert token["user_id"] in (user.id, str(user.id))

    def test_unknown_email_is_not_found(self, api_client):
        response = api_client.post(
            reverse("login"), {"email": "nobody@example.com", "password": "x"}, format="json"
        )

        assert response.status_code == 404
        assert response.data == {"message": "User not found"}

    def test_wrong_password_is_unauthorized(self, api_client, client_user):
        response = api_client.post(
            reverse("login"), {"email": client_user.email, "password": "wrong"}, format="json"
        )

        assert response.status_code == 401
        assert response.data["message"] == "Invalid credentials"

    def test_captcha_token_is_checked(self, api_client, client_user, settings):
        settings.RECAPTCHA_SECRET_KEY = "secret"
        fake = MagicMock()
        fake.json.return_value = {"success": True}

        with patch("apps.cores.captcha.requests.post", return_value=fake) as post:
            response = api_client.post(
                reverse("login"),
                {"email": client_user.email, "password": "testpass123", "captchaToken": "ok"},
                format="json",
            )

        assert response.status_code == 200
        assert post.call_args.kwargs["data"]["response"] == "ok"


class TestPasswordReset:

    def test_unknown_email_still_succeeds(self, api_client):
        response = api_client.post(
            reverse("forgot-password"), {"email": "ghost@example.com"}, format="json"
        )

        assert response.status_code == 200
        assert len(mail.outbox) == 0

    def test_known_email_gets_a_six_digit_code(self, api_client, client_user):
        response = api_client.post(
            reverse("forgot-password"), {"email": client_user.email}, format="json"
        )

        assert response.status_code == 200
        client_user.refresh_from_db()
        assert len(client_user.otp) == 6 and client_user.otp.isdigit()
        assert client_user.otp_expires > timezone.now() + timedelta(minutes=9)
        assert len(mail.outbox) == 1
        assert client_user.otp in mail.outbox[0].body

    def test_mail_failure_clears_code(self, api_client, client_user):
        with patch(
            "apps.users.services.send_password_reset_otp", side_effect=SMTPException("down")
        ):
            response = api_client.post(
                reverse("forgot-password"), {"email": client_user.email}, format="json"
            )

        assert response.status_code == 500
        assert response.data["message"] == "An error occurred while processing your request."
        client_user.refresh_from_db()
        assert client_user.otp is None
        assert client_user.otp_expires is None

    def test_valid_code_resets_password(self, api_client, client_user):
        client_user.otp = "123456"
        client_user.otp_expires = timezone.now() + timedelta(minutes=5)
        client_user.save()

        response = api_client.post(
            reverse("verify-otp"),
            {"email": client_user.email, "otp": "123456", "newPassword": "brandnew1"},
            format="json",
        )

        assert response.status_code == 200
        client_user.refresh_from_db()
        assert client_user.check_password("brandnew1")
        assert client_user.otp is None

    @pytest.mark.parametrize("otp, minutes", [("654321", 5), ("123456", -1)])
    def test_wrong_or_expired_code_is_rejected(self, api_client, client_user, otp, minutes):
        client_user.otp = "123456"
        client_user.otp_expires = timezone.now() + timedelta(minutes=minutes)
        client_user.save()

        response = api_client.post(
            reverse("verify-otp"),
            {"email": client_user.email, "otp": otp, "newPassword": "brandnew1"},
            format="json",
        )

        assert response.status_code == 400
        assert response.data["message"] == "OTP is invalid or has expired."
        client_user.refresh_from_db()
        assert client_user.check_password("testpass123")
