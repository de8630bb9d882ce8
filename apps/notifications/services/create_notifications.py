import logging

from django.db import DatabaseError, transaction

from apps.notifications.models import Notification

logger = logging.getLogger(__name__)


def notify_user(recipient, notif_type, message, link=""):
    """
    Best-effort: a failed write is logged and swallowed so the mutation that
    triggered it still succeeds. Runs in a savepoint so a failure does not
    poison the caller's transaction.
    """
    try:
        with transaction.atomic():
            return Notification.objects.create(
                recipient=recipient,
                notif_type=notif_type,
                message=message,
                link=link,
            )
    except DatabaseError:
        logger.exception(
            "Could not create %s notification for account %s",
            notif_type, getattr(recipient, "pk", recipient),
        )
        return None


def notify_many(recipients, notif_type, message, link=""):
    return [notify_user(r, notif_type, message, link) for r in recipients]
