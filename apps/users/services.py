import logging
from smtplib import SMTPException

from django.contrib.auth import get_user_model
from django.db import IntegrityError, transaction
from django.utils import timezone
from rest_framework.exceptions import AuthenticationFailed, NotFound, ValidationError

from apps.cores.exceptions import InternalError
from apps.freelancer.models import FreelancerProfile
from apps.projects.models import Project
from .emails import send_password_reset_otp
from .utils import generate_otp, otp_expiry

logger = logging.getLogger(__name__)

User = get_user_model()


@transaction.atomic
def register_account(*, name, email, password, role, group_name="", skills=None, social=None):
    """
    Create an account. Freelancers also get their role-specific payload row;
    Clients carry none.
    """
    email = email.lower().strip()
    if User.objects.filter(email=email).exists():
        raise ValidationError("User already exists")

    try:
        user = User.objects.create_user(
            email=email,
            name=name,
            password=password,
            role=role,
            group_name=group_name or "",
        )
    except IntegrityError:
        raise ValidationError("User already exists")

    if role == User.FREELANCER:
        social = social or {}
        FreelancerProfile.objects.create(
            user=user,
            skills=skills or [],
            github=social.get("github", ""),
            linkedin=social.get("linkedin", ""),
        )

    logger.info("Registered %s account %s", role, user.pk)
    return user


def authenticate_account(email, password):
    user = User.objects.filter(email=email.lower().strip()).first()
    if user is None:
        raise NotFound("User not found")

    if not user.check_password(password):
        raise AuthenticationFailed("Invalid credentials")

    if not user.is_active:
        raise AuthenticationFailed("User account is disabled.")

    return user


def request_password_reset(email):
    """
    Issue a one-time code and mail it. Silent when the email is unknown so
    callers cannot probe for registered addresses.
    """
    user = User.objects.filter(email=email.lower().strip()).first()
    if user is None:
        return

    user.otp = generate_otp()
    user.otp_expires = otp_expiry()
    user.save(update_fields=["otp", "otp_expires"])

    try:
        send_password_reset_otp(user.email, user.otp)
    except (SMTPException, OSError):
        logger.exception("Password reset mail to account %s failed", user.pk)
        user.clear_otp()
        user.save(update_fields=["otp", "otp_expires"])
        raise InternalError("An error occurred while processing your request.")


def confirm_password_reset(email, otp, new_password):
    user = User.objects.filter(
        email=email.lower().strip(),
        otp=otp,
        otp_expires__gt=timezone.now(),
    ).first()

    if user is None:
        raise ValidationError("OTP is invalid or has expired.")

    user.set_password(new_password)
    user.clear_otp()
    user.save(update_fields=["password", "otp", "otp_expires"])
    return user


@transaction.atomic
def delete_account(user):
    if user.is_client:
        deleted, _ = Project.objects.filter(client=user).delete()
        logger.info("Deleted %d rows owned by client %s", deleted, user.pk)

    user_id = user.pk
    user.delete()
    logger.info("Deleted account %s", user_id)
