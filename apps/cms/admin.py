from django.contrib import admin

from apps.cms.forms.layouts import LayoutForm
from apps.cms.models import Layout, Page, Revision, Site
from apps.cms.services.layouts import destroy_layout, save_layout


@admin.register(Site)
class SiteAdmin(admin.ModelAdmin):
    list_display = ("label", "identifier", "hostname", "locale")
    search_fields = ("label", "identifier", "hostname")


@admin.register(Layout)
class LayoutAdmin(admin.ModelAdmin):
    form = LayoutForm
    list_display = ("label", "identifier", "site", "parent", "position", "updated_at")
    search_fields = ("label", "identifier")
    list_filter = ("site",)

    def save_model(self, request, obj, form, change):
        save_layout(obj)

    def delete_model(self, request, obj):
        destroy_layout(obj)

    def delete_queryset(self, request, queryset):
        for layout in queryset:
            destroy_layout(layout)


@admin.register(Page)
class PageAdmin(admin.ModelAdmin):
    list_display = ("label", "full_path", "site", "layout", "is_published")
    search_fields = ("label", "full_path")
    list_filter = ("site", "is_published")


@admin.register(Revision)
class RevisionAdmin(admin.ModelAdmin):
    list_display = ("layout", "created_at")
    readonly_fields = ("layout", "data", "created_at")

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
