"""Revision log helpers for layouts."""

from __future__ import annotations

import logging
from typing import Optional

from apps.cms.conf import settings
from apps.cms.models.layout import Layout
from apps.cms.models.revision import REVISION_FIELDS, Revision

log = logging.getLogger(__name__)


def record_revision(layout: Layout) -> Optional[Revision]:
    """Store the previously persisted values of ``layout``'s tracked fields.

    Nothing is written for a new layout or when no tracked field changed.
    Must run before ``layout`` is saved.
    """

    if layout.pk is None:
        return None
    previous = Layout.objects.filter(pk=layout.pk).values(*REVISION_FIELDS).first()
    if previous is None:
        return None
    if all(previous[name] == getattr(layout, name) for name in REVISION_FIELDS):
        return None

    revision = Revision.objects.create(layout=layout, data=previous)
    prune_revisions(layout)
    return revision


def prune_revisions(layout: Layout) -> int:
    limit = max(int(settings.CMS_REVISIONS_LIMIT), 0)
    stale = list(
        Revision.objects.filter(layout=layout)
        .order_by("-created_at", "-id")
        .values_list("pk", flat=True)[limit:]
    )
    if not stale:
        return 0
    deleted, _ = Revision.objects.filter(pk__in=stale).delete()
    log.debug("Pruned %s revisions for layout %s", deleted, layout.pk)
    return deleted


def restore_from_revision(layout: Layout, revision: Revision) -> Layout:
    if revision.layout_id != layout.pk:
        raise ValueError("Revision does not belong to this layout.")
    # Imported here: the layouts service depends on this module.
    from apps.cms.services.layouts import save_layout

    for name in REVISION_FIELDS:
        if name in revision.data:
            setattr(layout, name, revision.data[name])
    return save_layout(layout)
