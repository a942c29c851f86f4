from django.test import TestCase
from django.urls import reverse

from apps.cms.models import Layout, Page, Site


class LayoutAssetViewTests(TestCase):
    def setUp(self):
        self.site = Site.objects.create(label="Default", identifier="default", hostname="example.com")
        self.layout = Layout.objects.create(
            site=self.site,
            identifier="default",
            css="body { margin: 0; }",
            js="console.log('hi');",
        )

    def asset_url(self, name, cache_buster=None):
        return reverse(
            name,
            kwargs={
                "site_id": self.site.pk,
                "identifier": self.layout.identifier,
                "cache_buster": self.layout.cache_buster if cache_buster is None else cache_buster,
            },
        )

    def test_css_is_served_with_long_cache(self):
        response = self.client.get(self.asset_url("cms:layout_css"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "text/css")
        self.assertEqual(response.content.decode(), "body { margin: 0; }")
        self.assertIn("max-age=", response["Cache-Control"])

    def test_js_is_served(self):
        response = self.client.get(self.asset_url("cms:layout_js"))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "application/javascript")
        self.assertEqual(response.content.decode(), "console.log('hi');")

    def test_stale_cache_buster_is_not_cached(self):
        response = self.client.get(self.asset_url("cms:layout_css", cache_buster=1))
        self.assertEqual(response.status_code, 200)
        self.assertIn("no-cache", response["Cache-Control"])

    def test_unknown_layout_returns_404(self):
        url = reverse(
            "cms:layout_css",
            kwargs={"site_id": self.site.pk, "identifier": "missing", "cache_buster": 0},
        )
        self.assertEqual(self.client.get(url).status_code, 404)


class PageContentViewTests(TestCase):
    def setUp(self):
        self.site = Site.objects.create(label="Default", identifier="default", hostname="example.com")
        layout = Layout.objects.create(
            site=self.site,
            identifier="default",
            content="<html>{{ cms:wysiwyg content }}</html>",
        )
        Page.objects.create(
            site=self.site,
            layout=layout,
            label="Home",
            full_path="/",
            fragments={"content": "Welcome"},
        )
        Page.objects.create(
            site=self.site,
            layout=layout,
            label="Docs",
            full_path="/docs/intro",
            fragments={"content": "Intro"},
        )
        Page.objects.create(
            site=self.site,
            layout=layout,
            label="Draft",
            full_path="/draft",
            is_published=False,
        )

    def test_root_page(self):
        response = self.client.get(reverse("cms:page_root", kwargs={"site_id": self.site.pk}))
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.content.decode(), "<html>Welcome</html>")

    def test_nested_page(self):
        url = reverse("cms:page", kwargs={"site_id": self.site.pk, "path": "docs/intro"})
        response = self.client.get(url)
        self.assertEqual(response.content.decode(), "<html>Intro</html>")

    def test_unpublished_and_missing_pages_return_404(self):
        for path in ("draft", "nope"):
            url = reverse("cms:page", kwargs={"site_id": self.site.pk, "path": path})
            self.assertEqual(self.client.get(url).status_code, 404)
