"""Runtime access to CMS configuration defaults."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from django.conf import settings as django_settings

__all__ = ["settings", "CmsSettings"]


@dataclass
class CmsSettings:
    """Proxy object exposing Django settings with sensible fallbacks."""

    defaults: dict[str, Any]

    def __getattr__(self, attr: str) -> Any:  # pragma: no cover - simple delegation
        if attr in self.defaults:
            return getattr(django_settings, attr, self.defaults[attr])
        return getattr(django_settings, attr)


settings = CmsSettings(
    defaults={
        "CMS_REVISIONS_LIMIT": 25,
        "CMS_FRAGMENT_TAGS": [],
        "CMS_LAYOUT_SPACER": ". . ",
        "CMS_ASSET_CACHE_SECONDS": 60 * 60 * 24 * 365,
    }
)
