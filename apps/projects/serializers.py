from rest_framework import serializers

from apps.freelancer.serializers import SkillListField
from apps.users.serializers import UserMiniSerializer, UserContactSerializer, ProfileSerializer
from .models import Project, Applicant, Task, Submission


class TaskSerializer(serializers.ModelSerializer):
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Task
        fields = ["id", "description", "completed", "createdAt"]
        read_only_fields = ["id", "completed"]


class TaskToggleSerializer(serializers.Serializer):
    completed = serializers.BooleanField()


class ApplicantSerializer(serializers.ModelSerializer):
    """Applicant as seen by the project owner."""

    freelancer = ProfileSerializer(read_only=True)
    coverLetter = serializers.CharField(source="cover_letter", read_only=True)
    appliedAt = serializers.DateTimeField(source="applied_at", read_only=True)
    tasks = TaskSerializer(many=True, read_only=True)

    class Meta:
        model = Applicant
        fields = ["id", "freelancer", "coverLetter", "status", "appliedAt", "tasks"]


class ApplySerializer(serializers.Serializer):
    coverLetter = serializers.CharField(
        allow_blank=True,
        error_messages={"required": "A cover letter is required."},
    )


class StatusSerializer(serializers.Serializer):
    status = serializers.CharField(error_messages={"required": "Invalid status update."})


class SubmissionSerializer(serializers.ModelSerializer):
    freelancer = UserMiniSerializer(read_only=True)
    githubUrl = serializers.URLField(source="github_url")
    clientFeedback = serializers.CharField(source="client_feedback", read_only=True)
    submittedAt = serializers.DateTimeField(source="submitted_at", read_only=True)

    class Meta:
        model = Submission
        fields = [
            "id", "freelancer", "message", "link", "githubUrl",
            "status", "clientFeedback", "submittedAt",
        ]
        read_only_fields = ["id", "status"]


class SubmitWorkSerializer(serializers.Serializer):
    message = serializers.CharField(allow_blank=True, required=False, default="")
    githubUrl = serializers.URLField(allow_blank=True, required=False, default="")
    link = serializers.URLField(allow_blank=True, required=False, default="")


class ReviewSubmissionSerializer(StatusSerializer):
    feedback = serializers.CharField(allow_blank=True, required=False, default="")


# -------- Projects --------
class ProjectSerializer(serializers.ModelSerializer):
    """
    Public projection. ``createdBy`` shows the owner's contact fields only
    when the view marks the caller as an accepted applicant.
    """

    skillsRequired = SkillListField(source="skills_required", required=False)
    createdBy = serializers.SerializerMethodField()
    applicantCount = serializers.SerializerMethodField()
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Project
        fields = [
            "id", "title", "description", "skillsRequired", "type",
            "deadline", "image", "featured", "createdBy", "applicantCount", "createdAt",
        ]
        read_only_fields = ["id", "featured"]

    def get_createdBy(self, obj):
        if self.context.get("reveal_contact"):
            return UserContactSerializer(obj.client).data
        return UserMiniSerializer(obj.client).data

    def get_applicantCount(self, obj):
        count = getattr(obj, "applicant_count", None)
        return count if count is not None else obj.applicants.count()


class ProjectWriteSerializer(serializers.ModelSerializer):
    skillsRequired = SkillListField(source="skills_required", required=False)

    class Meta:
        model = Project
        fields = ["title", "description", "skillsRequired", "type", "deadline", "image"]
        extra_kwargs = {
            "type": {"required": False},
            "image": {"required": False},
            "deadline": {"required": False},
        }


class OwnerProjectSerializer(ProjectSerializer):
    """Owner projection with the applicants, their tasks and the submissions."""

    applicants = ApplicantSerializer(many=True, read_only=True)
    submissions = SubmissionSerializer(many=True, read_only=True)

    class Meta(ProjectSerializer.Meta):
        fields = ProjectSerializer.Meta.fields + ["applicants", "submissions"]


# -------- Freelancer read model --------
class LatestSubmissionSerializer(serializers.Serializer):
    id = serializers.IntegerField()
    status = serializers.CharField()
    submittedAt = serializers.DateTimeField(source="submitted_at")


class MyApplicationSerializer(serializers.ModelSerializer):
    projectId = serializers.IntegerField(source="project_id")
    projectTitle = serializers.CharField(source="project.title")
    projectDescription = serializers.CharField(source="project.description")
    projectDeadline = serializers.DateTimeField(source="project.deadline")
    hasSubmitted = serializers.SerializerMethodField()
    submission = serializers.SerializerMethodField()
    tasks = TaskSerializer(many=True, read_only=True)
    appliedAt = serializers.DateTimeField(source="applied_at")

    class Meta:
        model = Applicant
        fields = [
            "id", "projectId", "projectTitle", "projectDescription", "projectDeadline",
            "status", "hasSubmitted", "submission", "tasks", "appliedAt",
        ]
        read_only_fields = fields

    def get_hasSubmitted(self, obj):
        return obj.latest_submission is not None

    def get_submission(self, obj):
        if obj.latest_submission is None:
            return None
        data = LatestSubmissionSerializer(obj.latest_submission).data
        data["clientFeedback"] = obj.latest_feedback
        return data
