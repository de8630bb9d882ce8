from django.contrib import admin
from .models import User
from apps.freelancer.models import FreelancerProfile, PastProject


@admin.register(User)
class UserAdmin(admin.ModelAdmin):
    list_display = ("email", "name", "role", "is_active", "created_at")
    list_filter = ("role", "is_active")
    search_fields = ("email", "name")
    exclude = ("password", "otp", "otp_expires")


admin.site.register(FreelancerProfile)
admin.site.register(PastProject)
