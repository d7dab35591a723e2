from django.contrib import admin
from .models import StudentProfile


@admin.register(StudentProfile)
class StudentProfileAdmin(admin.ModelAdmin):
    list_display = (
        "id",
        "full_name",
        "student_number",
        "section",
        "user",
        "created_at",
    )
    list_filter = ("section",)
    search_fields = ("full_name", "student_number", "user__national_id")
