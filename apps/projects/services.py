import logging

from django.db import transaction
from rest_framework.exceptions import NotFound, PermissionDenied, ValidationError

from apps.cores.exceptions import Conflict
from apps.notifications.models import Notification
from apps.notifications.services.create_notifications import notify_user, notify_many
from .models import Project, Applicant, Task, Submission

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# lookups
# ---------------------------------------------------------------------------

def get_project(project_id, *, for_update=False, queryset=None):
    qs = Project.objects.all() if queryset is None else queryset
    if for_update:
        qs = qs.select_for_update()
    try:
        return qs.get(pk=project_id)
    except Project.DoesNotExist:
        raise NotFound("Project not found")


def get_applicant(project, applicant_id):
    try:
        return project.applicants.select_related("freelancer").get(pk=applicant_id)
    except Applicant.DoesNotExist:
        raise NotFound("Application not found.")


def get_task(applicant, task_id):
    try:
        return applicant.tasks.get(pk=task_id)
    except Task.DoesNotExist:
        raise NotFound("Task not found.")


def ensure_project_owner(project, user, action="modify this project"):
    if project.client_id != user.pk:
        raise PermissionDenied(f"You are not authorized to {action}.")


# ---------------------------------------------------------------------------
# project CRUD
# ---------------------------------------------------------------------------

def create_project(client, **fields):
    project = Project.objects.create(client=client, **fields)
    logger.info("Client %s created project %s", client.pk, project.pk)
    return project


@transaction.atomic
def update_project(project_id, user, **fields):
    project = get_project(project_id, for_update=True)
    ensure_project_owner(project, user, "edit this project")

    for name, value in fields.items():
        setattr(project, name, value)
    project.save()
    return project


@transaction.atomic
def delete_project(project_id, user):
    """
    Every current applicant hears about the deletion before the project
    row goes away.
    """
    project = get_project(project_id, for_update=True)
    ensure_project_owner(project, user, "delete this project")

    freelancers = [a.freelancer for a in project.applicants.select_related("freelancer")]
    notify_many(
        freelancers,
        Notification.PROJECT_DELETED,
        f'The project "{project.title}" you applied for has been deleted by the client.',
    )

    project_pk = project.pk
    project.delete()
    logger.info("Client %s deleted project %s", user.pk, project_pk)


# ---------------------------------------------------------------------------
# applicants
# ---------------------------------------------------------------------------

@transaction.atomic
def apply_to_project(project_id, freelancer, cover_letter):
    if not freelancer.is_freelancer:
        raise PermissionDenied("Only freelancers can apply to projects.")

    if not (cover_letter or "").strip():
        raise ValidationError("A cover letter is required.")

    project = get_project(project_id, for_update=True)

    if project.applicants.filter(freelancer=freelancer).exists():
        raise Conflict("You have already applied to this project.")

    applicant = Applicant.objects.create(
        project=project,
        freelancer=freelancer,
        cover_letter=cover_letter,
    )

    notify_user(
        project.client,
        Notification.NEW_APPLICANT,
        f'You have a new applicant for your project "{project.title}".',
        f"/projects/{project.pk}/applicants",
    )
    return applicant


@transaction.atomic
def set_applicant_status(project_id, applicant_id, user, new_status):
    """
    Owner decision on an application: ``pending`` moves to ``accepted`` or
    ``rejected`` and stays there. Repeating the current decision is allowed
    and notifies again.
    """
    if new_status not in (Applicant.ACCEPTED, Applicant.REJECTED):
        raise ValidationError("Invalid status update.")

    project = get_project(project_id, for_update=True)
    ensure_project_owner(project, user, "modify applications for this project")
    applicant = get_applicant(project, applicant_id)

    if applicant.status not in (Applicant.PENDING, new_status):
        raise ValidationError(
            f"Applicant has already been {applicant.status}."
        )

    applicant.status = new_status
    applicant.save(update_fields=["status"])

    notify_user(
        applicant.freelancer,
        Notification.APPLICATION_STATUS,
        f'Your application for the project "{project.title}" has been {new_status}.',
        "/my-applications",
    )
    return applicant


@transaction.atomic
def admin_set_applicant_status(project_id, applicant_id, new_status):
    """Moderation override, any status, no notification."""
    if new_status not in dict(Applicant.STATUS_CHOICES):
        raise ValidationError("Invalid status value.")

    project = get_project(project_id, for_update=True)
    applicant = get_applicant(project, applicant_id)

    applicant.status = new_status
    applicant.save(update_fields=["status"])
    return applicant


# ---------------------------------------------------------------------------
# tasks
# ---------------------------------------------------------------------------

@transaction.atomic
def add_task(project_id, applicant_id, user, description):
    if not (description or "").strip():
        raise ValidationError("Task description is required.")

    project = get_project(project_id, for_update=True)
    ensure_project_owner(project, user, "add tasks to this project")
    applicant = get_applicant(project, applicant_id)

    if applicant.status != Applicant.ACCEPTED:
        raise ValidationError("Tasks can only be added for accepted applicants.")

    task = Task.objects.create(applicant=applicant, description=description)

    notify_user(
        applicant.freelancer,
        Notification.NEW_TASK,
        f'You have a new task for the project "{project.title}".',
        "/my-applications",
    )
    return task


@transaction.atomic
def toggle_task(project_id, applicant_id, task_id, user, completed):
    project = get_project(project_id, for_update=True)
    applicant = get_applicant(project, applicant_id)

    # owner and the assigned freelancer may both flip a task
    if user.pk not in (project.client_id, applicant.freelancer_id):
        raise PermissionDenied("You are not authorized to update tasks for this project.")

    task = get_task(applicant, task_id)
    task.completed = completed
    task.save(update_fields=["completed"])
    return task


@transaction.atomic
def delete_task(project_id, applicant_id, task_id, user):
    project = get_project(project_id, for_update=True)
    ensure_project_owner(project, user, "delete tasks for this project")
    applicant = get_applicant(project, applicant_id)

    get_task(applicant, task_id).delete()


# ---------------------------------------------------------------------------
# submissions
# ---------------------------------------------------------------------------

@transaction.atomic
def submit_work(project_id, freelancer, message, github_url, link=""):
    if not (message or "").strip() or not (github_url or "").strip():
        raise ValidationError("A submission message and GitHub URL are required.")

    project = get_project(project_id, for_update=True)

    is_accepted = project.applicants.filter(
        freelancer=freelancer, status=Applicant.ACCEPTED
    ).exists()
    if not is_accepted:
        raise PermissionDenied("You are not an accepted freelancer for this project.")

    # resubmitting adds a new row; the latest one is derived on read
    submission = Submission.objects.create(
        project=project,
        freelancer=freelancer,
        message=message,
        github_url=github_url,
        link=link or "",
    )

    notify_user(
        project.client,
        Notification.NEW_SUBMISSION,
        f'A freelancer has submitted work for your project "{project.title}".',
        "/team",
    )
    return submission


@transaction.atomic
def review_submission(project_id, submission_id, user, new_status, feedback=""):
    if new_status not in (Submission.APPROVED, Submission.CHANGES_REQUESTED):
        raise ValidationError("Invalid status update.")

    feedback = (feedback or "").strip()
    if new_status == Submission.CHANGES_REQUESTED and not feedback:
        raise ValidationError("Feedback is required when requesting changes.")

    project = get_project(project_id, for_update=True)
    ensure_project_owner(project, user, "review submissions for this project")

    try:
        submission = project.submissions.select_related("freelancer").get(pk=submission_id)
    except Submission.DoesNotExist:
        raise NotFound("Submission not found.")

    if submission.status == Submission.APPROVED:
        raise ValidationError("Submission has already been approved.")

    submission.status = new_status
    update_fields = ["status"]
    if new_status == Submission.CHANGES_REQUESTED:
        submission.client_feedback = feedback
        update_fields.append("client_feedback")
    submission.save(update_fields=update_fields)

    label = new_status.replace("_", " ")
    notify_user(
        submission.freelancer,
        Notification.SUBMISSION_REVIEWED,
        f'Your submission for "{project.title}" has been {label}.',
        "/my-tasks",
    )
    return submission


# ---------------------------------------------------------------------------
# admin
# ---------------------------------------------------------------------------

def set_featured(project_id, featured):
    updated = Project.objects.filter(pk=project_id).update(featured=featured)
    if not updated:
        raise NotFound("Project not found")
    return get_project(project_id)
