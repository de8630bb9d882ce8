from django.contrib.auth.models import AbstractUser, BaseUserManager
from django.db import models
from django.utils import timezone


class UserManager(BaseUserManager):
    """Custom user manager supporting email authentication."""

    use_in_migrations = True

    def create_user(self, email, name, password=None, **extra_fields):
        if not email:
            raise ValueError("Email is required")
        if not name:
            raise ValueError("Name is required")

        email = self.normalize_email(email).lower()

        user = self.model(
            email=email,
            name=name,
            **extra_fields
        )
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, email, name, password=None, **extra_fields):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)
        extra_fields.setdefault("role", User.ADMIN)  # Force admin role

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self.create_user(email, name, password, **extra_fields)


class User(AbstractUser):
    FREELANCER = "Freelancer"
    CLIENT = "Client"
    ADMIN = "Admin"

    ROLE_CHOICES = (
        (FREELANCER, "Freelancer"),
        (CLIENT, "Client"),
        (ADMIN, "Admin"),
    )

    username = None
    first_name = None
    last_name = None

    name = models.CharField(max_length=150)
    email = models.EmailField(unique=True, db_index=True)
    role = models.CharField(max_length=20, choices=ROLE_CHOICES)

    group_name = models.CharField(max_length=150, blank=True, default="")
    image = models.URLField(max_length=500, blank=True, default="")
    bio = models.TextField(blank=True, default="")

    # password reset, both empty outside a reset flow
    otp = models.CharField(max_length=6, null=True, blank=True)
    otp_expires = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(default=timezone.now, db_index=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS = ["name"]

    class Meta:
        db_table = "users"
        indexes = [
            models.Index(fields=["role", "created_at"], name="users_role_created_idx"),
        ]

    def __str__(self):
        return f"{self.email} ({self.role})"

    @property
    def is_freelancer(self):
        return self.role == self.FREELANCER

    @property
    def is_client(self):
        return self.role == self.CLIENT

    @property
    def is_admin(self):
        return self.role == self.ADMIN

    def clear_otp(self):
        self.otp = None
        self.otp_expires = None
