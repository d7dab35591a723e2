import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("exams", "0001_initial"),
        ("students", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Result",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("score", models.PositiveIntegerField(default=0)),
                ("total_questions", models.PositiveIntegerField(default=0)),
                ("percentage", models.DecimalField(decimal_places=2, default=0, max_digits=5)),
                ("is_guest", models.BooleanField(default=False)),
                ("guest_name", models.CharField(blank=True, default="", max_length=200)),
                ("started_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("completed_at", models.DateTimeField(default=django.utils.timezone.now)),
                ("exam", models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name="results", to="exams.examtemplate")),
                ("student", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.CASCADE, related_name="results", to="students.studentprofile")),
            ],
            options={
                "db_table": "results_result",
                "ordering": ["-completed_at", "-id"],
                "indexes": [
                    models.Index(fields=["exam", "student"], name="results_exam_student_idx"),
                    models.Index(fields=["is_guest"], name="results_is_guest_idx"),
                ],
            },
        ),
    ]
