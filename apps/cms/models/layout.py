"""Layout model: reusable content/css/js template arranged in a per-site tree."""

from __future__ import annotations

import glob
import os
import re
from typing import Iterable, List, Optional, Tuple

from django.conf import settings as django_settings
from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator
from django.db import models
from django.db.models import Max

from apps.cms.conf import settings
from apps.cms.content.renderer import Token, tokenize
from apps.cms.content.tags import is_fragment_content_placeholder
from apps.cms.models.site import Site

IDENTIFIER_RE = r"\A[A-Za-z_][A-Za-z0-9_-]*\Z"

identifier_validator = RegexValidator(
    IDENTIFIER_RE,
    message="Identifier may only contain letters, digits, underscores and hyphens, "
    "and must start with a letter or underscore.",
)


def titleize(value: str | None) -> str:
    """``"main_layout"`` -> ``"Main Layout"``."""

    words = re.split(r"[\s_-]+", (value or "").strip())
    return " ".join(word.capitalize() for word in words if word)


class Layout(models.Model):
    """A template record whose content may be wrapped by its parent's content."""

    site = models.ForeignKey(Site, on_delete=models.CASCADE, related_name="layouts")
    parent = models.ForeignKey(
        "self",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="children",
    )
    app_layout = models.CharField(
        max_length=255,
        blank=True,
        default="",
        help_text="Project template wrapping the rendered layout.",
    )
    label = models.CharField(max_length=255, blank=True)
    identifier = models.CharField(max_length=255, validators=[identifier_validator])
    content = models.TextField(blank=True, default="")
    css = models.TextField(blank=True, default="")
    js = models.TextField(blank=True, default="")
    position = models.IntegerField(default=0)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("position", "id")
        constraints = [
            models.UniqueConstraint(
                fields=("site", "identifier"),
                name="unique_layout_identifier_per_site",
            ),
        ]
        indexes = [
            models.Index(fields=("site", "parent", "position"), name="layout_site_parent_pos_idx"),
        ]

    def __str__(self) -> str:
        return self.label or self.identifier

    # ------------------------------------------------------------------
    # Validation & defaults
    # ------------------------------------------------------------------
    def assign_label(self) -> None:
        if not (self.label or "").strip():
            self.label = titleize(self.identifier)

    def assign_position(self) -> None:
        if (self.position or 0) > 0:
            return
        siblings = Layout.objects.filter(site_id=self.site_id, parent_id=self.parent_id)
        if self.pk:
            siblings = siblings.exclude(pk=self.pk)
        top = siblings.aggregate(top=Max("position"))["top"]
        self.position = 0 if top is None else top + 1

    def clean_fields(self, exclude=None):
        # Label is derived before the required-field checks run.
        self.assign_label()
        errors = {}
        try:
            super().clean_fields(exclude=exclude)
        except ValidationError as e:
            errors = e.update_error_dict(errors)
        if not self.label and not (exclude and "label" in exclude):
            errors.setdefault("label", []).append(
                ValidationError("This field cannot be blank.", code="blank")
            )
        if errors:
            raise ValidationError(errors)

    def unique_error_message(self, model_class, unique_check):
        if tuple(unique_check) == ("site", "identifier"):
            return ValidationError(
                {"identifier": "A layout with this identifier already exists on this site."}
            )
        return super().unique_error_message(model_class, unique_check)

    def clean(self):
        super().clean()
        if self.parent_id is None:
            return
        # A missing parent is already reported by clean_fields().
        parent = Layout.objects.filter(pk=self.parent_id).first()
        if parent is None:
            return
        if self.site_id is not None and parent.site_id != self.site_id:
            raise ValidationError({"parent": "Parent layout must belong to the same site."})
        if self.pk is not None:
            if self.parent_id == self.pk or any(a.pk == self.pk for a in parent.ancestors()):
                raise ValidationError(
                    {"parent": "A layout cannot be nested under itself or its descendants."}
                )

    def save(self, *args, **kwargs):
        self.assign_label()
        if self._state.adding:
            self.assign_position()
        super().save(*args, **kwargs)

    # ------------------------------------------------------------------
    # Tree helpers
    # ------------------------------------------------------------------
    @classmethod
    def roots(cls, site: Site):
        return cls.objects.filter(site=site, parent__isnull=True)

    def ancestors(self) -> List["Layout"]:
        """Parent first, root last. Stops on a repeated node."""

        out: List[Layout] = []
        seen = {self.pk}
        node = self.parent
        while node is not None and node.pk not in seen:
            out.append(node)
            seen.add(node.pk)
            node = node.parent
        return out

    def descendants(self) -> List["Layout"]:
        out: List[Layout] = []
        for child in self.children.all():
            out.append(child)
            out.extend(child.descendants())
        return out

    @property
    def cache_buster(self) -> int:
        return int(self.updated_at.timestamp()) if self.updated_at else 0

    # ------------------------------------------------------------------
    # Content
    # ------------------------------------------------------------------
    def content_tokens(self) -> List[Token]:
        """Tokens of this layout merged into its parent's ``content`` fragment.

        When the parent has no ``content`` fragment tag, the parent's tokens
        are returned and this layout's own content is dropped.
        """

        tokens = tokenize(self.content)
        if self.parent is None:
            return tokens

        parent_tokens = self.parent.content_tokens()
        for index, token in enumerate(parent_tokens):
            if is_fragment_content_placeholder(token):
                return parent_tokens[:index] + tokens + parent_tokens[index + 1:]
        return parent_tokens

    # ------------------------------------------------------------------
    # Select options
    # ------------------------------------------------------------------
    @classmethod
    def options_for_select(
        cls,
        site: Site,
        exclude_layout: Optional["Layout"] = None,
        current_layout: Optional["Layout"] = None,
        depth: int = 0,
        spacer: Optional[str] = None,
    ) -> List[Tuple[str, int]]:
        """Flatten the site's layout tree into indented ``(label, id)`` pairs.

        The excluded layout is left out; its children are still listed.
        """

        if spacer is None:
            spacer = settings.CMS_LAYOUT_SPACER
        if current_layout is None:
            layouts: Iterable[Layout] = cls.roots(site)
        else:
            layouts = [current_layout]

        out: List[Tuple[str, int]] = []
        for layout in layouts:
            if exclude_layout is None or layout != exclude_layout:
                out.append((f"{spacer * depth}{layout.label}", layout.id))
            for child in layout.children.all():
                out += cls.options_for_select(site, exclude_layout, child, depth + 1, spacer)
        return out

    @classmethod
    def app_layouts_for_select(cls, view_paths: Optional[Iterable] = None) -> List[str]:
        """Names of project templates under ``layouts/`` in ``view_paths``.

        Partials (basename starting with ``_``) are skipped; directory prefix
        below ``layouts/`` is kept, extensions are stripped.
        """

        if view_paths is None:
            view_paths = [
                path
                for engine in django_settings.TEMPLATES
                for path in engine.get("DIRS", [])
            ]

        names = set()
        for root in view_paths:
            base = os.path.join(str(root), "layouts")
            pattern = os.path.join(glob.escape(base), "**", "*.html*")
            for filename in glob.glob(pattern, recursive=True):
                if not os.path.isfile(filename):
                    continue
                relative = os.path.relpath(filename, base).replace(os.sep, "/")
                if relative.rsplit("/", 1)[-1].startswith("_"):
                    continue
                head, _, tail = relative.rpartition("/")
                stem = tail.split(".", 1)[0]
                names.add(f"{head}/{stem}" if head else stem)
        return sorted(names)
