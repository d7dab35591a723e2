from django.contrib import admin

from .models import Result


@admin.register(Result)
class ResultAdmin(admin.ModelAdmin):
    list_display = ("id", "exam", "student", "guest_name", "score", "total_questions", "percentage", "completed_at")
    list_filter = ("is_guest", "exam")
    search_fields = ("guest_name", "student__full_name", "student__student_number")

    def has_change_permission(self, request, obj=None):
        return False
