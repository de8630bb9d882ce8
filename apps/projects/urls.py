from django.urls import path
from .views import (
    ProjectListCreateView,
    ProjectDetailView,
    UserProjectsView,
    ApplyView,
    MyApplicationsView,
    MyProjectsView,
    ProjectApplicationsView,
    ApplicantStatusView,
    TaskCreateView,
    TaskDetailView,
    SubmitWorkView,
    ReviewSubmissionView,
)


urlpatterns = [
    path('', ProjectListCreateView.as_view(), name='project-list'),

    # Role-scoped lists (before <pk> so they are not read as ids)
    path('my-applications/list', MyApplicationsView.as_view(), name='my-applications'),
    path('my-projects/list', MyProjectsView.as_view(), name='my-projects'),
    path('user/<int:user_id>', UserProjectsView.as_view(), name='user-projects'),

    path('<int:pk>', ProjectDetailView.as_view(), name='project-detail'),
    path('<int:pk>/apply', ApplyView.as_view(), name='project-apply'),
    path('<int:pk>/applications', ProjectApplicationsView.as_view(), name='project-applications'),

    # Applicant decisions and tasks
    path(
        '<int:project_id>/applications/<int:applicant_id>/status',
        ApplicantStatusView.as_view(),
        name='applicant-status',
    ),
    path(
        '<int:project_id>/applications/<int:applicant_id>/tasks',
        TaskCreateView.as_view(),
        name='task-create',
    ),
    path(
        '<int:project_id>/applications/<int:applicant_id>/tasks/<int:task_id>',
        TaskDetailView.as_view(),
        name='task-detail',
    ),

    # Submissions
    path('<int:project_id>/submit', SubmitWorkView.as_view(), name='submit-work'),
    path(
        '<int:project_id>/submissions/<int:submission_id>/status',
        ReviewSubmissionView.as_view(),
        name='submission-status',
    ),
]
