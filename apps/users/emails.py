# apps/users/emails.py
from django.conf import settings
from django.core.mail import send_mail


def send_password_reset_otp(email: str, otp: str):
    minutes = settings.PASSWORD_RESET_OTP_MINUTES
    subject = "Password Reset OTP"
    message = (
        "You are receiving this because you (or someone else) have requested the reset "
        "of the password for your account.\n\n"
        f"Your OTP code is: {otp}\n\n"
        f"This code will expire in {minutes} minutes.\n\n"
        "If you did not request this, please ignore this email and your password "
        "will remain unchanged.\n"
    )
    html_message = (
        "<p>You are receiving this because you (or someone else) have requested the reset "
        "of the password for your account.</p>"
        f"<p>Your OTP code is: <strong>{otp}</strong></p>"
        f"<p>This code will expire in {minutes} minutes.</p>"
        "<p>If you did not request this, please ignore this email and your password "
        "will remain unchanged.</p>"
    )
    send_mail(
        subject,
        message,
        settings.DEFAULT_FROM_EMAIL,
        [email],
        html_message=html_message,
    )
