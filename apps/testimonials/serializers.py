from rest_framework import serializers
from .models import Testimonial


REQUIRED = {"required": "All fields are required.", "blank": "All fields are required."}


class TestimonialSerializer(serializers.ModelSerializer):
    name = serializers.CharField(max_length=150, trim_whitespace=True, error_messages=REQUIRED)
    role = serializers.CharField(max_length=150, trim_whitespace=True, error_messages=REQUIRED)
    quote = serializers.CharField(error_messages=REQUIRED)
    rating = serializers.IntegerField(
        min_value=1, max_value=5,
        error_messages={**REQUIRED, "null": "All fields are required."},
    )
    createdAt = serializers.DateTimeField(source="created_at", read_only=True)

    class Meta:
        model = Testimonial
        fields = ["id", "name", "role", "quote", "rating", "avatar", "visible", "createdAt"]
        read_only_fields = ["id", "avatar", "visible"]


class VisibilitySerializer(serializers.Serializer):
    visible = serializers.BooleanField()
