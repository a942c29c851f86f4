from apps.cms.models.site import Site
from apps.cms.models.layout import Layout
from apps.cms.models.page import Page
from apps.cms.models.revision import Revision

__all__ = [
    "Site",
    "Layout",
    "Page",
    "Revision",
]
