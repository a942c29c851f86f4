import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Site",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("label", models.CharField(max_length=255)),
                ("identifier", models.SlugField(max_length=255, unique=True)),
                ("hostname", models.CharField(max_length=255)),
                ("path", models.CharField(blank=True, default="", max_length=255)),
                ("locale", models.CharField(default="en", max_length=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ("identifier",),
            },
        ),
        migrations.CreateModel(
            name="Layout",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                (
                    "app_layout",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Project template wrapping the rendered layout.",
                        max_length=255,
                    ),
                ),
                ("label", models.CharField(blank=True, max_length=255)),
                (
                    "identifier",
                    models.CharField(
                        max_length=255,
                        validators=[
                            django.core.validators.RegexValidator(
                                r"\A[A-Za-z_][A-Za-z0-9_-]*\Z",
                                message="Identifier may only contain letters, digits, underscores and hyphens, "
                                "and must start with a letter or underscore.",
                            )
                        ],
                    ),
                ),
                ("content", models.TextField(blank=True, default="")),
                ("css", models.TextField(blank=True, default="")),
                ("js", models.TextField(blank=True, default="")),
                ("position", models.IntegerField(default=0)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "parent",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="children",
                        to="cms.layout",
                    ),
                ),
                (
                    "site",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="layouts",
                        to="cms.site",
                    ),
                ),
            ],
            options={
                "ordering": ("position", "id"),
                "indexes": [
                    models.Index(fields=["site", "parent", "position"], name="layout_site_parent_pos_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        fields=("site", "identifier"), name="unique_layout_identifier_per_site"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Page",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("label", models.CharField(max_length=255)),
                ("slug", models.SlugField(blank=True, max_length=255)),
                ("full_path", models.CharField(default="/", max_length=1024)),
                (
                    "fragments",
                    models.JSONField(
                        blank=True,
                        default=dict,
                        help_text="Fragment content keyed by fragment identifier.",
                    ),
                ),
                ("content_cache", models.TextField(blank=True, editable=False, null=True)),
                ("is_published", models.BooleanField(default=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "layout",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="pages",
                        to="cms.layout",
                    ),
                ),
                (
                    "site",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="pages",
                        to="cms.site",
                    ),
                ),
            ],
            options={
                "ordering": ("site", "full_path"),
                "constraints": [
                    models.UniqueConstraint(
                        fields=("site", "full_path"), name="unique_page_full_path_per_site"
                    ),
                ],
            },
        ),
        migrations.CreateModel(
            name="Revision",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("data", models.JSONField(default=dict)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "layout",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="revisions",
                        to="cms.layout",
                    ),
                ),
            ],
            options={
                "ordering": ("-created_at", "-id"),
                "indexes": [
                    models.Index(fields=["layout", "created_at"], name="revision_layout_created_idx"),
                ],
            },
        ),
    ]
