"""Append-only history of a layout's content, css and js."""

from django.db import models

from apps.cms.models.layout import Layout

REVISION_FIELDS = ("content", "css", "js")


class Revision(models.Model):
    layout = models.ForeignKey(Layout, on_delete=models.CASCADE, related_name="revisions")
    # Previous values of REVISION_FIELDS, keyed by field name.
    data = models.JSONField(default=dict)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ("-created_at", "-id")
        indexes = [
            models.Index(fields=("layout", "created_at"), name="revision_layout_created_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.layout} @ {self.created_at:%Y-%m-%d %H:%M}"

    def save(self, *args, **kwargs):
        if self.pk:
            raise ValueError("Revisions are append-only and cannot be changed.")
        super().save(*args, **kwargs)
