from datetime import timedelta

from django.contrib.auth import get_user_model
from django.db.models import Count, Q
from django.utils import timezone

from apps.projects.models import Applicant

User = get_user_model()

HISTOGRAM_DAYS = 7


def user_stats(now=None):
    """
    Role totals, recent sign-up counts and a per-day sign-up histogram for
    the last seven calendar days (oldest first). Recomputed on every call.
    """
    now = now or timezone.now()

    totals = User.objects.aggregate(
        total=Count("id"),
        freelancers=Count("id", filter=Q(role=User.FREELANCER)),
        clients=Count("id", filter=Q(role=User.CLIENT)),
        admins=Count("id", filter=Q(role=User.ADMIN)),
        recent7Days=Count("id", filter=Q(created_at__gte=now - timedelta(days=7))),
        recent30Days=Count("id", filter=Q(created_at__gte=now - timedelta(days=30))),
    )

    today = timezone.localdate(now)
    daily = []
    for offset in range(HISTOGRAM_DAYS - 1, -1, -1):
        day = today - timedelta(days=offset)
        counts = User.objects.filter(created_at__date=day).aggregate(
            freelancers=Count("id", filter=Q(role=User.FREELANCER)),
            clients=Count("id", filter=Q(role=User.CLIENT)),
        )
        daily.append({
            "date": day.isoformat(),
            "freelancers": counts["freelancers"],
            "clients": counts["clients"],
            "total": counts["freelancers"] + counts["clients"],
        })

    return {**totals, "dailyStats": daily}


def all_applicants():
    """Every applicant row across projects, newest application first."""
    return (
        Applicant.objects
        .select_related(
            "project", "project__client",
            "freelancer", "freelancer__freelancer_profile",
        )
        .prefetch_related("tasks", "freelancer__freelancer_profile__past_projects")
        .order_by("-applied_at", "-id")
    )
