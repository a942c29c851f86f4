"""Site model owning layouts and pages."""

from django.db import models


class Site(models.Model):
    label = models.CharField(max_length=255)
    identifier = models.SlugField(max_length=255, unique=True)
    hostname = models.CharField(max_length=255)
    path = models.CharField(max_length=255, blank=True, default="")
    locale = models.CharField(max_length=10, default="en")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("identifier",)

    def __str__(self) -> str:
        return self.label
