"""
URL configuration for the cmssite project.
"""
from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path("admin/", admin.site.urls),
    path("cms/", include("apps.cms.urls")),
]
