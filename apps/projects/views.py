from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics, permissions, status
from rest_framework.filters import SearchFilter
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.cores.authentication import OptionalJWTAuthentication
from apps.cores.permissions import IsClient, IsFreelancer
from . import services
from .filters import ProjectFilter
from .selectors import (
    project_list_queryset,
    project_details_queryset,
    owner_projects_queryset,
    is_accepted_applicant,
    my_applications,
)
from .serializers import (
    ProjectSerializer,
    ProjectWriteSerializer,
    OwnerProjectSerializer,
    ApplySerializer,
    ApplicantSerializer,
    StatusSerializer,
    TaskSerializer,
    TaskToggleSerializer,
    SubmitWorkSerializer,
    ReviewSubmissionSerializer,
    SubmissionSerializer,
    MyApplicationSerializer,
)


class ProjectListCreateView(generics.ListCreateAPIView):
    """
    GET  -> every project, newest first (public)
    POST -> create a project (clients only)
    """
    filter_backends = [DjangoFilterBackend, SearchFilter]
    filterset_class = ProjectFilter
    search_fields = ["title", "description"]

    def get_queryset(self):
        return project_list_queryset()

    def get_permissions(self):
        if self.request.method == "POST":
            return [permissions.IsAuthenticated(), IsClient()]
        return [permissions.AllowAny()]

    def get_authenticators(self):
        if self.request is not None and self.request.method == "GET":
            return [OptionalJWTAuthentication()]
        return super().get_authenticators()

    def get_serializer_class(self):
        if self.request.method == "POST":
            return ProjectWriteSerializer
        return ProjectSerializer

    def create(self, request, *args, **kwargs):
        serializer = ProjectWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = services.create_project(request.user, **serializer.validated_data)
        return Response(ProjectSerializer(project).data, status=status.HTTP_201_CREATED)


class ProjectDetailView(APIView):
    """
    GET    -> public read; owner contact fields only for accepted applicants
    PUT    -> owner edit
    DELETE -> owner delete, notifying every applicant first
    """

    def get_authenticators(self):
        if self.request is not None and self.request.method == "GET":
            return [OptionalJWTAuthentication()]
        return super().get_authenticators()

    def get_permissions(self):
        if self.request.method == "GET":
            return [permissions.AllowAny()]
        return [permissions.IsAuthenticated(), IsClient()]

    def get(self, request, pk):
        project = services.get_project(pk, queryset=project_list_queryset())
        context = {"reveal_contact": is_accepted_applicant(project, request.user)}
        return Response(ProjectSerializer(project, context=context).data)

    def put(self, request, pk):
        serializer = ProjectWriteSerializer(data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)

        project = services.update_project(pk, request.user, **serializer.validated_data)
        return Response({
            "message": "Project updated successfully",
            "project": ProjectSerializer(project).data,
        })

    def delete(self, request, pk):
        services.delete_project(pk, request.user)
        return Response({"message": "Project deleted successfully"})


class UserProjectsView(generics.ListAPIView):
    """Projects created by one client (public)."""
    serializer_class = ProjectSerializer
    permission_classes = [permissions.AllowAny]
    authentication_classes = [OptionalJWTAuthentication]

    def get_queryset(self):
        return project_list_queryset().filter(client_id=self.kwargs["user_id"])


# -------- Applications --------
class ApplyView(APIView):
    permission_classes = [permissions.IsAuthenticated, IsFreelancer]

    def post(self, request, pk):
        serializer = ApplySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        applicant = services.apply_to_project(
            pk, request.user, serializer.validated_data["coverLetter"]
        )
        return Response(
            {
                "message": "Application submitted successfully!",
                "applicant": ApplicantSerializer(applicant).data,
            },
            status=status.HTTP_200_OK,
        )


class MyApplicationsView(generics.ListAPIView):
    serializer_class = MyApplicationSerializer
    permission_classes = [permissions.IsAuthenticated, IsFreelancer]

    def get_queryset(self):
        return my_applications(self.request.user)


class MyProjectsView(generics.ListAPIView):
    serializer_class = OwnerProjectSerializer
    permission_classes = [permissions.IsAuthenticated, IsClient]

    def get_queryset(self):
        return owner_projects_queryset(self.request.user)


class ProjectApplicationsView(APIView):
    """Owner view of one project with full applicant details."""
    permission_classes = [permissions.IsAuthenticated, IsClient]

    def get(self, request, pk):
        project = services.get_project(pk, queryset=project_details_queryset())
        services.ensure_project_owner(project, request.user, "view applications for this project")
        return Response(OwnerProjectSerializer(project).data)


class ApplicantStatusView(APIView):
    permission_classes = [permissions.IsAuthenticated, IsClient]

    def patch(self, request, project_id, applicant_id):
        serializer = StatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        new_status = serializer.validated_data["status"]

        applicant = services.set_applicant_status(project_id, applicant_id, request.user, new_status)
        return Response({
            "message": f"Application has been {new_status}.",
            "applicant": ApplicantSerializer(applicant).data,
        })


# -------- Tasks --------
class TaskCreateView(APIView):
    permission_classes = [permissions.IsAuthenticated, IsClient]

    def post(self, request, project_id, applicant_id):
        serializer = TaskSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        task = services.add_task(
            project_id, applicant_id, request.user, serializer.validated_data["description"]
        )
        return Response(
            ApplicantSerializer(task.applicant).data,
            status=status.HTTP_201_CREATED,
        )


class TaskDetailView(APIView):
    """
    PATCH  -> set ``completed`` (owner or the assigned freelancer)
    DELETE -> remove the task (owner)
    """
    permission_classes = [permissions.IsAuthenticated]

    def patch(self, request, project_id, applicant_id, task_id):
        serializer = TaskToggleSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        task = services.toggle_task(
            project_id, applicant_id, task_id, request.user,
            serializer.validated_data["completed"],
        )
        return Response(ApplicantSerializer(task.applicant).data)

    def delete(self, request, project_id, applicant_id, task_id):
        services.delete_task(project_id, applicant_id, task_id, request.user)
        return Response({"message": "Task deleted successfully."})


# -------- Submissions --------
class SubmitWorkView(APIView):
    permission_classes = [permissions.IsAuthenticated, IsFreelancer]

    def post(self, request, project_id):
        serializer = SubmitWorkSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        submission = services.submit_work(
            project_id, request.user,
            message=data["message"],
            github_url=data["githubUrl"],
            link=data["link"],
        )
        return Response({
            "message": "Work submitted successfully!",
            "submission": SubmissionSerializer(submission).data,
        })


class ReviewSubmissionView(APIView):
    permission_classes = [permissions.IsAuthenticated, IsClient]

    def patch(self, request, project_id, submission_id):
        serializer = ReviewSubmissionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        new_status = serializer.validated_data["status"]

        submission = services.review_submission(
            project_id, submission_id, request.user,
            new_status, serializer.validated_data["feedback"],
        )
        return Response({
            "message": f"Submission status updated to {new_status}.",
            "submission": SubmissionSerializer(submission).data,
        })
