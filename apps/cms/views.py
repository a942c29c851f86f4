"""Public CMS endpoints: layout assets and rendered pages."""

from __future__ import annotations

import logging

from django.http import Http404, HttpResponse
from django.shortcuts import get_object_or_404
from django.utils.cache import patch_cache_control
from django.views.decorators.http import require_GET

from apps.cms.conf import settings
from apps.cms.models.layout import Layout
from apps.cms.models.page import Page

log = logging.getLogger(__name__)

ASSET_CONTENT_TYPES = {
    "css": "text/css",
    "js": "application/javascript",
}


@require_GET
def layout_asset(request, site_id: int, identifier: str, cache_buster: int, kind: str):
    """Serve a layout's css or js.

    The URL embeds ``Layout.cache_buster`` so responses can be cached for a
    long time; a stale buster is still served but not cached.
    """

    if kind not in ASSET_CONTENT_TYPES:
        raise Http404("Unknown asset type")
    layout = get_object_or_404(Layout, site_id=site_id, identifier=identifier)
    response = HttpResponse(getattr(layout, kind), content_type=ASSET_CONTENT_TYPES[kind])
    if cache_buster == layout.cache_buster:
        patch_cache_control(response, public=True, max_age=settings.CMS_ASSET_CACHE_SECONDS)
    else:
        patch_cache_control(response, no_cache=True)
    return response


@require_GET
def page_content(request, site_id: int, path: str = ""):
    full_path = "/" + path.strip("/")
    page = get_object_or_404(Page, site_id=site_id, full_path=full_path, is_published=True)
    log.debug("Rendering page %s for site %s", full_path, site_id)
    return HttpResponse(page.rendered_content())
