from unittest.mock import patch, MagicMock

import pytest
import requests

from apps.cores.captcha import verify_captcha


@pytest.fixture
def captcha_secret(settings):
    settings.RECAPTCHA_SECRET_KEY = "secret"
    return settings


def fake_response(payload):
    response = MagicMock()
    response.json.return_value = payload
    return response


def test_skipped_without_secret(settings):
    settings.RECAPTCHA_SECRET_KEY = ""

    with patch("apps.cores.captcha.requests.post") as post:
        assert verify_captcha(None) is True

    post.assert_not_called()


def test_missing_token_fails(captcha_secret):
    with patch("apps.cores.captcha.requests.post") as post:
        assert verify_captcha("") is False

    post.assert_not_called()


def test_accepted_token(captcha_secret):
    with patch("apps.cores.captcha.requests.post", return_value=fake_response({"success": True})) as post:
        assert verify_captcha("token", "10.0.0.1") is True

    payload = post.call_args.kwargs["data"]
    assert payload == {"secret": "secret", "response": "token", "remoteip": "10.0.0.1"}
    assert post.call_args.kwargs["timeout"] == 10


def test_rejected_token(captcha_secret):
    with patch("apps.cores.captcha.requests.post", return_value=fake_response({"success": False})):
        assert verify_captcha("token") is False


def test_network_error_fails_closed(captcha_secret):
    with patch("apps.cores.captcha.requests.post", side_effect=requests.ConnectionError("down")):
        assert verify_captcha("token") is False
