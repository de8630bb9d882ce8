from rest_framework import generics, permissions, status
from rest_framework.response import Response

from .models import Testimonial
from .serializers import TestimonialSerializer


PUBLIC_LIMIT = 10


class TestimonialListCreateView(generics.ListCreateAPIView):
    """
    GET  -> the latest visible testimonials
    POST -> anyone may leave one; it stays hidden until approved
    """
    serializer_class = TestimonialSerializer
    permission_classes = [permissions.AllowAny]
    authentication_classes = []

    def get_queryset(self):
        return Testimonial.objects.filter(visible=True)[:PUBLIC_LIMIT]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        serializer.save()

        return Response(
            {"message": "Thank you for your feedback!", "testimonial": serializer.data},
            status=status.HTTP_201_CREATED,
        )
