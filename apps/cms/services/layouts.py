"""Write path for layouts.

Saving or destroying a layout clears the cached rendered content of every page
that uses it, directly or through a descendant layout. The clearing runs after
the surrounding transaction commits.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import List

from django.db import transaction

from apps.cms.models.layout import Layout
from apps.cms.models.page import Page
from apps.cms.services.revisions import record_revision

log = logging.getLogger(__name__)


def clear_page_content_cache(layout: Layout) -> int:
    """Reset ``content_cache`` for pages of ``layout`` and of its whole subtree.

    Returns the number of pages updated.
    """

    cleared = Page.objects.filter(layout=layout).update(content_cache=None)
    for child in layout.children.all():
        cleared += clear_page_content_cache(child)
    log.debug("Cleared content cache of %s pages for layout %s", cleared, layout.pk)
    return cleared


def subtree_page_ids(layout: Layout) -> List[int]:
    ids = list(Page.objects.filter(layout=layout).values_list("pk", flat=True))
    for child in layout.children.all():
        ids.extend(subtree_page_ids(child))
    return ids


def _clear_pages(page_ids: List[int]) -> int:
    cleared = Page.objects.filter(pk__in=page_ids).update(content_cache=None)
    log.debug("Cleared content cache of %s pages", cleared)
    return cleared


def save_layout(layout: Layout) -> Layout:
    """Validate and persist ``layout``.

    Raises ``django.core.exceptions.ValidationError`` without writing anything
    when the layout is invalid.
    """

    layout.full_clean()
    with transaction.atomic():
        record_revision(layout)
        layout.save()
        transaction.on_commit(partial(clear_page_content_cache, layout))
    log.info("Saved layout %s (site %s)", layout.identifier, layout.site_id)
    return layout


def destroy_layout(layout: Layout) -> None:
    """Delete ``layout`` with its subtree; its pages keep existing without a layout."""

    with transaction.atomic():
        page_ids = subtree_page_ids(layout)
        identifier = layout.identifier
        layout.delete()
        transaction.on_commit(partial(_clear_pages, page_ids))
    log.info("Destroyed layout %s, %s pages detached or invalidated", identifier, len(page_ids))
