from django.urls import path

from apps.cms import views

app_name = "cms"

urlpatterns = [
    path(
        "css/<int:site_id>/<str:identifier>/<int:cache_buster>.css",
        views.layout_asset,
        {"kind": "css"},
        name="layout_css",
    ),
    path(
        "js/<int:site_id>/<str:identifier>/<int:cache_buster>.js",
        views.layout_asset,
        {"kind": "js"},
        name="layout_js",
    ),
    path("pages/<int:site_id>/", views.page_content, name="page_root"),
    path("pages/<int:site_id>/<path:path>", views.page_content, name="page"),
]
