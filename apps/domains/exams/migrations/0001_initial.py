import apps.domains.exams.models.exam
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("subjects", "0001_initial"),
        ("students", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="ExamTemplate",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("name", models.CharField(max_length=255)),
                ("duration_minutes", models.PositiveIntegerField(default=apps.domains.exams.models.exam._default_duration)),
                ("allow_reattempt", models.BooleanField(default=False)),
                ("is_active", models.BooleanField(default=True)),
                ("subject", models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name="exams", to="subjects.subject")),
            ],
            options={
                "db_table": "exams_exam_template",
                "ordering": ["-id"],
            },
        ),
        migrations.CreateModel(
            name="Question",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("text", models.TextField()),
                ("sort_order", models.IntegerField(default=0)),
                ("exam", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="questions", to="exams.examtemplate")),
            ],
            options={
                "db_table": "exams_question",
                "ordering": ["sort_order", "id"],
            },
        ),
        migrations.CreateModel(
            name="AnswerChoice",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("text", models.TextField()),
                ("is_correct", models.BooleanField(default=False)),
                ("sort_order", models.IntegerField(default=0)),
                ("question", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="answers", to="exams.question")),
            ],
            options={
                "db_table": "exams_answer_choice",
                "ordering": ["sort_order", "id"],
            },
        ),
        migrations.CreateModel(
            name="QuestionReport",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("message", models.TextField()),
                ("status", models.CharField(choices=[("pending", "Pending"), ("resolved", "Resolved")], default="pending", max_length=20)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("exam", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="question_reports", to="exams.examtemplate")),
                ("question", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="reports", to="exams.question")),
                ("student", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="question_reports", to="students.studentprofile")),
            ],
            options={
                "db_table": "exams_question_report",
                "ordering": ["-created_at"],
            },
        ),
    ]
