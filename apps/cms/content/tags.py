"""Known ``{{ cms:... }}`` tag kinds.

Every tag a layout may contain is listed here up front. Fragment tags mark
places where page (or child layout) content is inserted; the rest belong to
subsystems that render nothing at the layout level.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Dict, Mapping

from django.core.signals import setting_changed
from django.dispatch import receiver

from apps.cms.conf import settings

CONTENT_FRAGMENT = "content"


@dataclass(frozen=True)
class TagKind:
    name: str
    is_fragment: bool = False

    def identifier(self, params: str) -> str:
        """First whitespace-delimited parameter, or ``""``."""

        parts = (params or "").split()
        return parts[0] if parts else ""

    def is_fragment_content_placeholder(self, params: str) -> bool:
        return self.is_fragment and self.identifier(params) == CONTENT_FRAGMENT

    def render(self, params: str, context: Mapping[str, Any]) -> str:
        if not self.is_fragment:
            return ""
        fragments = context.get("fragments") or {}
        value = fragments.get(self.identifier(params), "")
        return "" if value is None else str(value)


FRAGMENT_TAGS = (
    "fragment",
    "content",
    "wysiwyg",
    "text",
    "textarea",
    "markdown",
    "datetime",
    "date",
    "checkbox",
    "number",
    "file",
    "files",
)

OTHER_TAGS = ("snippet", "partial", "helper", "asset")


@lru_cache(maxsize=None)
def get_registry() -> Dict[str, TagKind]:
    registry = {name: TagKind(name) for name in OTHER_TAGS}
    for name in (*FRAGMENT_TAGS, *settings.CMS_FRAGMENT_TAGS):
        registry[name] = TagKind(name, is_fragment=True)
    return registry


def get_tag(name: str) -> TagKind | None:
    return get_registry().get(name)


def fragment_tag_names() -> frozenset[str]:
    return frozenset(name for name, kind in get_registry().items() if kind.is_fragment)


def is_fragment_content_placeholder(token: Any) -> bool:
    """True for a tag token that a child layout's content is spliced into."""

    if not isinstance(token, Mapping):
        return False
    kind = get_tag(token.get("tag_class", ""))
    return kind is not None and kind.is_fragment_content_placeholder(token.get("tag_params", ""))


@receiver(setting_changed)
def _reset_registry(sender, setting, **kwargs):
    if setting == "CMS_FRAGMENT_TAGS":
        get_registry.cache_clear()
