"""Page model rendered through its layout."""

from __future__ import annotations

from django.db import models

from apps.cms.content.renderer import render
from apps.cms.models.layout import Layout
from apps.cms.models.site import Site


class Page(models.Model):
    site = models.ForeignKey(Site, on_delete=models.CASCADE, related_name="pages")
    layout = models.ForeignKey(
        Layout,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="pages",
    )
    label = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, blank=True)
    full_path = models.CharField(max_length=1024, default="/")
    fragments = models.JSONField(
        default=dict,
        blank=True,
        help_text="Fragment content keyed by fragment identifier.",
    )
    # Null means "render again on next access".
    content_cache = models.TextField(null=True, blank=True, editable=False)
    is_published = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("site", "full_path")
        constraints = [
            models.UniqueConstraint(
                fields=("site", "full_path"),
                name="unique_page_full_path_per_site",
            ),
        ]

    def __str__(self) -> str:
        return self.label

    def render(self) -> str:
        if self.layout is None:
            return ""
        return render(self.layout.content_tokens(), {"page": self, "fragments": self.fragments})

    def rendered_content(self) -> str:
        """Cached rendered content, rebuilt when the cache has been cleared."""

        if self.content_cache is None:
            self.content_cache = self.render()
            if self.pk:
                Page.objects.filter(pk=self.pk).update(content_cache=self.content_cache)
        return self.content_cache

    def save(self, *args, **kwargs):
        # Fragment edits invalidate the page's own cache.
        self.content_cache = None
        super().save(*args, **kwargs)
