from django.db import models
from django.conf import settings
from django.core.validators import MinValueValidator, MaxValueValidator

User = settings.AUTH_USER_MODEL


class FreelancerProfile(models.Model):
    """
    Role-specific payload carried only by Freelancer accounts.
    Client and Admin accounts have no profile row.
    """

    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name="freelancer_profile")
    skills = models.JSONField(default=list, blank=True)

    github = models.URLField(max_length=300, blank=True, default="")
    linkedin = models.URLField(max_length=300, blank=True, default="")

    rating_value = models.DecimalField(
        max_digits=3, decimal_places=2, default=0,
        validators=[MinValueValidator(0), MaxValueValidator(5)],
    )
    rating_reviews = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "freelancer_profiles"

    def __str__(self):
        return f"Freelancer Profile: {self.user.email}"


class PastProject(models.Model):
    freelancer = models.ForeignKey(FreelancerProfile, on_delete=models.CASCADE, related_name="past_projects")
    title = models.CharField(max_length=200, blank=True, default="")
    role = models.CharField(max_length=120, blank=True, default="")
    link = models.URLField(max_length=500, blank=True, default="")

    class Meta:
        db_table = "freelancer_past_projects"
        ordering = ["id"]

    def __str__(self):
        return self.title or f"Past project #{self.pk}"
