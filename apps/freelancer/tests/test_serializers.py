import pytest
from rest_framework import serializers

from apps.freelancer.serializers import SkillListField, FreelancerProfileSerializer


class TestSkillListField:

    @pytest.mark.parametrize("raw, expected", [
        (["Python", " Django ", "Python"], ["Python", "Django"]),
        ('["Go", "Rust"]', ["Go", "Rust"]),
        ("React, Node ,", ["React", "Node"]),
        ("", []),
        (None, []),
    ])
    def test_accepted_shapes(self, raw, expected):
        assert SkillListField().to_internal_value(raw) == expected

    def test_rejects_mapping(self):
        with pytest.raises(serializers.ValidationError):
            SkillListField().to_internal_value({"skill": "Python"})


@pytest.mark.django_db
class TestFreelancerProfileSerializer:

    def test_past_projects_are_replaced(self, freelancer):
        profile = freelancer.freelancer_profile
        serializer = FreelancerProfileSerializer(
            profile,
            data={"pastProjects": [{"title": "A"}, {"title": ""}, {"title": "B", "role": "Dev"}]},
            partial=True,
        )
        assert serializer.is_valid(), serializer.errors
        serializer.save()

        assert list(profile.past_projects.values_list("title", flat=True)) == ["A", "B"]

        serializer = FreelancerProfileSerializer(profile, data={"pastProjects": []}, partial=True)
        assert serializer.is_valid(), serializer.errors
        serializer.save()

        assert profile.past_projects.count() == 0

    def test_skills_left_alone_when_absent(self, freelancer):
        profile = freelancer.freelancer_profile
        serializer = FreelancerProfileSerializer(
            profile, data={"social": {"github": "https://github.com/new"}}, partial=True
        )
        assert serializer.is_valid(), serializer.errors
        serializer.save()

        profile.refresh_from_db()
        assert profile.github == "https://github.com/new"
        assert profile.skills == ["Python", "Django"]
