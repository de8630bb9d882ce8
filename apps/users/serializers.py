from rest_framework import serializers
from django.contrib.auth import get_user_model
from django.db import transaction

from apps.freelancer.serializers import FreelancerProfileSerializer, SkillListField, SocialSerializer
from .services import register_account


User = get_user_model()


# -------- Signup --------
class SignupSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=150)
    email = serializers.EmailField()
    password = serializers.CharField(
        write_only=True,
        min_length=6,
        style={'input_type': 'password'},
    )
    role = serializers.ChoiceField(choices=[
        (User.FREELANCER, "Freelancer"),
        (User.CLIENT, "Client"),
    ])
    groupName = serializers.CharField(source='group_name', max_length=150, required=False, allow_blank=True)

    # Freelancer only
    skills = SkillListField(required=False)
    social = SocialSerializer(required=False)

    captchaToken = serializers.CharField(required=False, allow_blank=True, allow_null=True, write_only=True)

    def validate_email(self, value):
        value = value.lower().strip()
        if User.objects.filter(email=value).exists():
            raise serializers.ValidationError("User already exists")
        return value

    def create(self, validated_data):
        validated_data.pop('captchaToken', None)
        return register_account(**validated_data)


# -------- Login --------
class LoginSerializer(serializers.Serializer):
    email = serializers.EmailField()
    password = serializers.CharField(write_only=True, style={'input_type': 'password'})
    captchaToken = serializers.CharField(required=False, allow_blank=True, allow_null=True, write_only=True)


# -------- Forgot Password --------
class ForgotPasswordSerializer(serializers.Serializer):
    email = serializers.EmailField()


# -------- Verify OTP + set new password --------
class VerifyOTPSerializer(serializers.Serializer):
    email = serializers.EmailField()
    otp = serializers.RegexField(r'^\d{6}$', error_messages={'invalid': 'OTP is invalid or has expired.'})
    newPassword = serializers.CharField(write_only=True, min_length=6, style={'input_type': 'password'})


# -------- Public projections --------
class UserMiniSerializer(serializers.ModelSerializer):
    groupName = serializers.CharField(source='group_name', read_only=True)

    class Meta:
        model = User
        fields = ["id", "name", "image", "groupName", "bio"]


class UserContactSerializer(UserMiniSerializer):
    """Mini projection plus the private contact fields."""

    email = serializers.EmailField(read_only=True)
    linkedin = serializers.SerializerMethodField()

    class Meta(UserMiniSerializer.Meta):
        fields = UserMiniSerializer.Meta.fields + ["email", "linkedin"]

    def get_linkedin(self, obj):
        profile = getattr(obj, "freelancer_profile", None)
        return profile.linkedin if profile else ""


# -------- Profile --------
class ProfileSerializer(serializers.ModelSerializer):
    FREELANCER_FIELDS = ("skills", "social", "pastProjects")

    groupName = serializers.CharField(source='group_name', required=False, allow_blank=True, max_length=150)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = User
        fields = ["id", "name", "email", "role", "groupName", "image", "bio", "createdAt"]
        read_only_fields = ["id", "email", "role"]

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if instance.is_freelancer:
            profile = getattr(instance, "freelancer_profile", None)
            if profile is not None:
                data.update(FreelancerProfileSerializer(profile).data)
        return data

    def validate(self, attrs):
        # Freelancer payload keys are ignored for the other roles
        if self.instance is not None and self.instance.is_freelancer:
            payload = {
                key: self.initial_data[key]
                for key in self.FREELANCER_FIELDS
                if key in self.initial_data
            }
            if payload:
                profile = getattr(self.instance, "freelancer_profile", None)
                nested = FreelancerProfileSerializer(profile, data=payload, partial=True)
                nested.is_valid(raise_exception=True)
                self._freelancer_serializer = nested
        return attrs

    @transaction.atomic
    def update(self, instance, validated_data):
        instance = super().update(instance, validated_data)

        nested = getattr(self, "_freelancer_serializer", None)
        if nested is not None:
            if nested.instance is None:
                nested.save(user=instance)
            else:
                nested.save()
            instance.refresh_from_db()

        return instance


class PublicProfileSerializer(ProfileSerializer):
    """Email is only public for Freelancers."""

    def to_representation(self, instance):
        data = super().to_representation(instance)
        if not instance.is_freelancer:
            data.pop("email", None)
        return data


# -------- Admin listing --------
class AdminUserSerializer(ProfileSerializer):
    isActive = serializers.BooleanField(source='is_active', read_only=True)

    class Meta(ProfileSerializer.Meta):
        fields = ProfileSerializer.Meta.fields + ["isActive"]
        read_only_fields = fields
