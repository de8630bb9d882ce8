# apps/users/utils.py
import secrets
from datetime import timedelta

from django.conf import settings
from django.utils import timezone


def generate_otp(length: int = 6) -> str:
    """
    Generate a numeric OTP of `length` digits as a string.
    The first digit is never zero, so the code always has `length` digits.
    Example: '734591'
    """
    if length <= 0:
        raise ValueError("length must be > 0")
    first = str(secrets.randbelow(9) + 1)
    return first + "".join(str(secrets.randbelow(10)) for _ in range(length - 1))


def otp_expiry(minutes: int = None):
    """Absolute expiry timestamp for a code issued now."""
    if minutes is None:
        minutes = settings.PASSWORD_RESET_OTP_MINUTES
    return timezone.now() + timedelta(minutes=minutes)
