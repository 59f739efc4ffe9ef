import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="MemberProfile",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("role", models.CharField(
                    choices=[
                        ("free", "Free"),
                        ("trial", "Trial"),
                        ("monthly", "Monthly"),
                        ("annual", "Annual"),
                        ("downsell", "Downsell"),
                        ("admin", "Admin"),
                    ],
                    default="free",
                    max_length=20,
                )),
                ("pressed_not_ready", models.BooleanField(default=False)),
                ("blueprint_done", models.BooleanField(default=False)),
                ("user", models.OneToOneField(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="member_profile",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "abstract": False,
            },
        ),
        migrations.CreateModel(
            name="MasterclassPurchase",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("course_id", models.SlugField(max_length=120)),
                ("user", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="masterclass_purchases",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "unique_together": {("user", "course_id")},
            },
        ),
        migrations.CreateModel(
            name="LessonCompletion",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                ("course_id", models.SlugField(max_length=120)),
                ("lesson_index", models.PositiveIntegerField()),
                ("user", models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name="lesson_completions",
                    to=settings.AUTH_USER_MODEL,
                )),
            ],
            options={
                "ordering": ["course_id", "lesson_index"],
                "unique_together": {("user", "course_id", "lesson_index")},
            },
        ),
    ]
