from __future__ import annotations

import logging

from django.core.management.base import BaseCommand, CommandError

from apps.cms.models import Layout, Site
from apps.cms.services.layouts import clear_page_content_cache

error_logger = logging.getLogger(name="app_errors")
debug_logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Clear cached page content for a layout subtree, or for every layout of a site."

    def add_arguments(self, parser):
        parser.add_argument("site", help="Site identifier")
        parser.add_argument("--layout", dest="layout", help="Layout identifier (default: all root layouts)")

    def handle(self, *args, **options):
        try:
            site = Site.objects.get(identifier=options["site"])
        except Site.DoesNotExist:
            error_logger.error("Unknown site %s", options["site"])
            raise CommandError(f"Site not found: {options['site']}")

        if options.get("layout"):
            try:
                layouts = [Layout.objects.get(site=site, identifier=options["layout"])]
            except Layout.DoesNotExist:
                error_logger.error("Unknown layout %s on site %s", options["layout"], site.identifier)
                raise CommandError(f"Layout not found: {options['layout']}")
        else:
            layouts = list(Layout.roots(site))

        cleared = 0
        for layout in layouts:
            cleared += clear_page_content_cache(layout)
            debug_logger.info("Cleared page cache below layout %s", layout.identifier)

        self.stdout.write(
            self.style.SUCCESS(f"Cleared content cache for {cleared} pages on site {site.identifier}.")
        )
