from django.contrib.auth import get_user_model
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics, permissions
from rest_framework.exceptions import NotFound
from rest_framework.filters import SearchFilter, OrderingFilter
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.cores.permissions import IsAdminRole
from apps.projects import services as project_services
from apps.projects.selectors import project_list_queryset
from apps.testimonials.models import Testimonial
from apps.testimonials.serializers import TestimonialSerializer, VisibilitySerializer
from apps.users.serializers import AdminUserSerializer
from .selectors import user_stats, all_applicants
from .serializers import (
    AdminProjectSerializer,
    AdminApplicantSerializer,
    ApplicantOverrideSerializer,
    FeaturedSerializer,
)

User = get_user_model()

ADMIN_ONLY = [permissions.IsAuthenticated, IsAdminRole]


class AdminUserList(generics.ListAPIView):
    serializer_class = AdminUserSerializer
    permission_classes = ADMIN_ONLY

    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ["role", "is_active"]
    search_fields = ["email", "name"]
    ordering_fields = ["created_at", "id", "name"]

    def get_queryset(self):
        return (
            User.objects
            .select_related("freelancer_profile")
            .prefetch_related("freelancer_profile__past_projects")
            .order_by("-created_at", "-id")
        )


class AdminUserStatsView(APIView):
    permission_classes = ADMIN_ONLY

    def get(self, request):
        return Response(user_stats())


class AdminProjectList(generics.ListAPIView):
    serializer_class = AdminProjectSerializer
    permission_classes = ADMIN_ONLY

    def get_queryset(self):
        return project_list_queryset()


class AdminApplicantList(generics.ListAPIView):
    serializer_class = AdminApplicantSerializer
    permission_classes = ADMIN_ONLY

    def get_queryset(self):
        return all_applicants()


class AdminTestimonialList(generics.ListAPIView):
    """Every testimonial, visible or not."""
    serializer_class = TestimonialSerializer
    permission_classes = ADMIN_ONLY
    queryset = Testimonial.objects.all()


class TestimonialVisibilityView(APIView):
    permission_classes = ADMIN_ONLY

    def patch(self, request, pk):
        serializer = VisibilitySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        testimonial = Testimonial.objects.filter(pk=pk).first()
        if testimonial is None:
            raise NotFound("Testimonial not found.")

        testimonial.visible = serializer.validated_data["visible"]
        testimonial.save(update_fields=["visible", "updated_at"])

        return Response({
            "message": "Testimonial visibility updated.",
            "testimonial": TestimonialSerializer(testimonial).data,
        })


class ApplicantOverrideView(APIView):
    """Moderation override of an applicant's status. Nobody is notified."""
    permission_classes = ADMIN_ONLY

    def patch(self, request, project_id, applicant_id):
        serializer = ApplicantOverrideSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        applicant = project_services.admin_set_applicant_status(
            project_id, applicant_id, serializer.validated_data["status"]
        )
        return Response({
            "message": "Applicant status updated.",
            "applicant": AdminApplicantSerializer(applicant).data,
        })


class ProjectFeaturedView(APIView):
    permission_classes = ADMIN_ONLY

    def patch(self, request, pk):
        serializer = FeaturedSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        project = project_services.set_featured(pk, serializer.validated_data["featured"])
        return Response(AdminProjectSerializer(project).data)
