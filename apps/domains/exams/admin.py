from django.contrib import admin

from .models import ExamTemplate, Question, AnswerChoice, QuestionReport


class AnswerChoiceInline(admin.TabularInline):
    model = AnswerChoice
    extra = 0


@admin.register(ExamTemplate)
class ExamTemplateAdmin(admin.ModelAdmin):
    list_display = ("id", "name", "subject", "duration_minutes", "allow_reattempt", "is_active")
    list_filter = ("subject", "allow_reattempt", "is_active")
    search_fields = ("name",)


@admin.register(Question)
class QuestionAdmin(admin.ModelAdmin):
    list_display = ("id", "exam", "sort_order", "text")
    list_filter = ("exam",)
    inlines = [AnswerChoiceInline]


@admin.register(QuestionReport)
class QuestionReportAdmin(admin.ModelAdmin):
    list_display = ("id", "exam", "question", "student", "status", "created_at")
    list_filter = ("status",)
