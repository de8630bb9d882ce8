from rest_framework import serializers
from django.db import transaction
import json
import logging

from .models import FreelancerProfile, PastProject

logger = logging.getLogger(__name__)


# ----------------------------
# Custom Field for Flexible List Input
# ----------------------------
class SkillListField(serializers.Field):
    """
    Accepts a list of skill names, a JSON-encoded list, or a comma-separated string.
    """
    def to_internal_value(self, data):
        if data is None or data == '':
            return []

        if isinstance(data, str):
            try:
                data = json.loads(data)
            except (json.JSONDecodeError, ValueError):
                data = data.split(',')

        if not isinstance(data, (list, tuple)):
            raise serializers.ValidationError("Skills must be a list of names.")

        skills = []
        for item in data:
            name = str(item).strip()
            if name and name not in skills:
                skills.append(name)
        return skills

    def to_representation(self, value):
        return list(value or [])


class SocialSerializer(serializers.Serializer):
    github = serializers.URLField(required=False, allow_blank=True, max_length=300)
    linkedin = serializers.URLField(required=False, allow_blank=True, max_length=300)


class RatingSerializer(serializers.Serializer):
    value = serializers.DecimalField(
        source='rating_value', max_digits=3, decimal_places=2,
        coerce_to_string=False, read_only=True,
    )
    reviews = serializers.IntegerField(source='rating_reviews', read_only=True)


class PastProjectSerializer(serializers.ModelSerializer):
    class Meta:
        model = PastProject
        fields = ['id', 'title', 'role', 'link']
        read_only_fields = ['id']


# ----------------------------
# Freelancer Profile Serializer
# ----------------------------
class FreelancerProfileSerializer(serializers.ModelSerializer):
    skills = SkillListField(required=False)
    social = SocialSerializer(source='*', required=False)
    rating = RatingSerializer(source='*', read_only=True)
    pastProjects = PastProjectSerializer(source='past_projects', many=True, required=False)

    class Meta:
        model = FreelancerProfile
        fields = ['skills', 'social', 'rating', 'pastProjects']

    @transaction.atomic
    def create(self, validated_data):
        past_projects = validated_data.pop('past_projects', [])
        profile = FreelancerProfile.objects.create(**validated_data)
        self._save_past_projects(profile, past_projects)
        return profile

    @transaction.atomic
    def update(self, instance, validated_data):
        # None means "leave as is"; an empty list clears them
        past_projects = validated_data.pop('past_projects', None)

        for key, value in validated_data.items():
            setattr(instance, key, value)
        instance.save()

        if past_projects is not None:
            self._save_past_projects(instance, past_projects)

        return instance

    def _save_past_projects(self, profile, past_projects):
        profile.past_projects.all().delete()

        entries = [
            PastProject(freelancer=profile, **entry)
            for entry in past_projects
            if any(entry.get(key) for key in ('title', 'role', 'link'))
        ]
        PastProject.objects.bulk_create(entries)
        logger.debug("Saved %d past projects for freelancer %s", len(entries), profile.user_id)
