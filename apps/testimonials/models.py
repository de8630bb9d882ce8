from django.db import models
from django.core.validators import MinValueValidator, MaxValueValidator


DEFAULT_AVATAR = (
    "https://images.unsplash.com/photo-1535713875002-d1d0cf377fde"
    "?auto=format&fit=crop&w=100&q=80"
)


class Testimonial(models.Model):
    """Public feedback. Hidden until an admin flips ``visible``."""

    name = models.CharField(max_length=150)
    role = models.CharField(max_length=150)
    quote = models.TextField()
    rating = models.PositiveSmallIntegerField(
        validators=[MinValueValidator(1), MaxValueValidator(5)]
    )
    avatar = models.URLField(max_length=500, default=DEFAULT_AVATAR)
    visible = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "testimonials"
        ordering = ["-created_at", "-id"]

    def __str__(self):
        return f"{self.name} ({self.rating}/5)"
