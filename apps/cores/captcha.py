import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)


def verify_captcha(token, remote_ip=None):
    """
    Check a reCAPTCHA response token with Google.

    Returns True when the token is accepted. With no secret configured the
    check is skipped (local development and tests).
    """
    secret_key = getattr(settings, "RECAPTCHA_SECRET_KEY", "")

    if not secret_key:
        logger.warning("CAPTCHA secret key not configured, skipping verification")
        return True

    if not token:
        return False

    payload = {
        "secret": secret_key,
        "response": token,
    }
    if remote_ip:
        payload["remoteip"] = remote_ip

    try:
        result = requests.post(settings.RECAPTCHA_VERIFY_URL, data=payload, timeout=10)
        return bool(result.json().get("success", False))
    except (requests.RequestException, ValueError) as e:
        logger.warning("CAPTCHA verification failed: %s", e)
        return False
