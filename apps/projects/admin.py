from django.contrib import admin
from .models import Project, Applicant, Task, Submission


class ApplicantInline(admin.TabularInline):
    model = Applicant
    extra = 0


class SubmissionInline(admin.TabularInline):
    model = Submission
    extra = 0


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ("title", "client", "featured", "created_at")
    list_filter = ("featured",)
    search_fields = ("title", "description")
    inlines = [ApplicantInline, SubmissionInline]


admin.site.register(Task)
