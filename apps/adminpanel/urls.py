from django.urls import path
from .views import (
    AdminUserList,
    AdminUserStatsView,
    AdminProjectList,
    AdminApplicantList,
    AdminTestimonialList,
    TestimonialVisibilityView,
    ApplicantOverrideView,
    ProjectFeaturedView,
)


urlpatterns = [
    path("users", AdminUserList.as_view(), name="admin-users"),
    path("stats/users", AdminUserStatsView.as_view(), name="admin-user-stats"),

    path("projects", AdminProjectList.as_view(), name="admin-projects"),
    path("projects/<int:pk>/featured", ProjectFeaturedView.as_view(), name="admin-project-featured"),

    path("applicants", AdminApplicantList.as_view(), name="admin-applicants"),
    path(
        "applicants/<int:project_id>/<int:applicant_id>/status",
        ApplicantOverrideView.as_view(),
        name="admin-applicant-status",
    ),

    path("testimonials", AdminTestimonialList.as_view(), name="admin-testimonials"),
    path(
        "testimonials/<int:pk>/visibility",
        TestimonialVisibilityView.as_view(),
        name="admin-testimonial-visibility",
    ),
]
