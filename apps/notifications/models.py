from django.db import models
from django.conf import settings



class Notification(models.Model):
    """
    Pull-only message for one account. Created as a side effect of project
    activity; only the read flag changes afterwards.
    """

    NEW_APPLICANT = "NEW_APPLICANT"
    APPLICATION_STATUS = "APPLICATION_STATUS"
    NEW_TASK = "NEW_TASK"
    PROJECT_DELETED = "PROJECT_DELETED"
    NEW_SUBMISSION = "NEW_SUBMISSION"
    SUBMISSION_REVIEWED = "SUBMISSION_REVIEWED"

    NOTIFICATION_TYPES = [
        (NEW_APPLICANT, "New Applicant"),
        (APPLICATION_STATUS, "Application Status"),
        (NEW_TASK, "New Task"),
        (PROJECT_DELETED, "Project Deleted"),
        (NEW_SUBMISSION, "New Submission"),
        (SUBMISSION_REVIEWED, "Submission Reviewed"),
    ]

    recipient = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications"
    )

    notif_type = models.CharField(
        max_length=50,
        choices=NOTIFICATION_TYPES
    )

    message = models.TextField()

    # frontend route, e.g. /projects/12/applicants
    link = models.CharField(max_length=255, blank=True, default="")

    read = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = "notifications"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"Notification({self.recipient_id}, {self.notif_type})"
