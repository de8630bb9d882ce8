from django.db.models import Count, Prefetch

from .models import Project, Applicant, Submission


def project_list_queryset():
    return (
        Project.objects
        .select_related("client")
        .annotate(applicant_count=Count("applicants"))
        .order_by("-created_at", "-id")
    )


def project_details_queryset():
    """Projects with applicants, their tasks and submissions loaded."""
    return (
        Project.objects
        .select_related("client")
        .annotate(applicant_count=Count("applicants"))
        .prefetch_related(
            Prefetch(
                "applicants",
                queryset=Applicant.objects
                .select_related("freelancer", "freelancer__freelancer_profile")
                .prefetch_related("tasks", "freelancer__freelancer_profile__past_projects"),
            ),
            Prefetch(
                "submissions",
                queryset=Submission.objects.select_related("freelancer"),
            ),
        )
        .order_by("-created_at", "-id")
    )


def is_accepted_applicant(project, user):
    if user is None or not user.is_authenticated:
        return False
    return project.applicants.filter(freelancer=user, status=Applicant.ACCEPTED).exists()


def my_applications(freelancer):
    """
    One row per application of ``freelancer``. Each row carries the latest
    submission by that freelancer on the project and, separately, the most
    recent feedback left on any of their submissions. The two can differ
    after a resubmission that has not been reviewed yet.
    """
    applications = list(
        Applicant.objects
        .filter(freelancer=freelancer)
        .select_related("project")
        .prefetch_related("tasks")
        .order_by("-applied_at", "-id")
    )

    submissions = (
        Submission.objects
        .filter(freelancer=freelancer, project_id__in=[a.project_id for a in applications])
        .order_by("-submitted_at", "-id")
    )

    latest = {}
    latest_feedback = {}
    for submission in submissions:
        latest.setdefault(submission.project_id, submission)
        if submission.client_feedback:
            latest_feedback.setdefault(submission.project_id, submission.client_feedback)

    for application in applications:
        application.latest_submission = latest.get(application.project_id)
        application.latest_feedback = latest_feedback.get(application.project_id)

    return applications


def owner_projects_queryset(client):
    return project_details_queryset().filter(client=client)
