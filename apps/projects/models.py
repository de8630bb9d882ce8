from django.db import models
from django.conf import settings
from django.utils import timezone

User = settings.AUTH_USER_MODEL


class Project(models.Model):
    """
    A client-owned project. Applicants (with their tasks) and submissions
    hang off it as owned child rows.
    """

    client = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="projects"
    )

    title = models.CharField(max_length=255)
    description = models.TextField()
    skills_required = models.JSONField(default=list, blank=True)
    type = models.CharField(max_length=100, blank=True, default="")

    deadline = models.DateTimeField(null=True, blank=True)
    image = models.URLField(max_length=500, blank=True, default="")

    # admin controlled
    featured = models.BooleanField(default=False)

    created_at = models.DateTimeField(default=timezone.now)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "projects"
        ordering = ["-created_at"]

    def __str__(self):
        return self.title


class Applicant(models.Model):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"

    STATUS_CHOICES = [
        (PENDING, "Pending"),
        (ACCEPTED, "Accepted"),
        (REJECTED, "Rejected"),
    ]

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name="applicants"
    )

    freelancer = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="applications"
    )

    cover_letter = models.TextField()

    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=PENDING
    )

    applied_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "project_applicants"
        # one entry per (project, freelancer) is checked at apply time
        ordering = ["id"]

    def __str__(self):
        return f"{self.freelancer_id} → {self.project_id} ({self.status})"


class Task(models.Model):
    applicant = models.ForeignKey(
        Applicant,
        on_delete=models.CASCADE,
        related_name="tasks"
    )

    description = models.TextField()
    completed = models.BooleanField(default=False)

    created_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "project_tasks"
        ordering = ["id"]

    def __str__(self):
        return self.description


class Submission(models.Model):
    PENDING = "pending"
    APPROVED = "approved"
    CHANGES_REQUESTED = "changes_requested"

    STATUS_CHOICES = [
        (PENDING, "Pending"),
        (APPROVED, "Approved"),
        (CHANGES_REQUESTED, "Changes requested"),
    ]

    project = models.ForeignKey(
        Project,
        on_delete=models.CASCADE,
        related_name="submissions"
    )

    freelancer = models.ForeignKey(
        User,
        on_delete=models.CASCADE,
        related_name="submissions"
    )

    message = models.TextField()
    link = models.URLField(max_length=500, blank=True, default="")
    github_url = models.URLField(max_length=500)

    status = models.CharField(
        max_length=20,
        choices=STATUS_CHOICES,
        default=PENDING
    )
    client_feedback = models.TextField(blank=True, default="")

    submitted_at = models.DateTimeField(default=timezone.now)

    class Meta:
        db_table = "project_submissions"
        ordering = ["submitted_at", "id"]

    def __str__(self):
        return f"Submission({self.freelancer_id} → {self.project_id}, {self.status})"
