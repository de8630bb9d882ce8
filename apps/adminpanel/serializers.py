from django.contrib.auth import get_user_model
from rest_framework import serializers

from apps.projects.models import Project, Applicant
from apps.projects.serializers import ApplicantSerializer, ProjectSerializer

User = get_user_model()


class OwnerSummarySerializer(serializers.ModelSerializer):
    class Meta:
        model = User
        fields = ["id", "name", "email"]


class AdminProjectSerializer(ProjectSerializer):
    """Project row for moderation: the owner is always shown with email."""

    def get_createdBy(self, obj):
        return OwnerSummarySerializer(obj.client).data


class ProjectRefSerializer(serializers.ModelSerializer):
    createdBy = OwnerSummarySerializer(source="client", read_only=True)

    class Meta:
        model = Project
        fields = ["id", "title", "createdBy"]


class AdminApplicantSerializer(ApplicantSerializer):
    project = ProjectRefSerializer(read_only=True)

    class Meta(ApplicantSerializer.Meta):
        model = Applicant
        fields = ApplicantSerializer.Meta.fields + ["project"]


class ApplicantOverrideSerializer(serializers.Serializer):
    status = serializers.CharField(error_messages={"required": "Invalid status value."})


class FeaturedSerializer(serializers.Serializer):
    featured = serializers.BooleanField()
