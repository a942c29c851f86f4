from apps.cms.forms.layouts import LayoutForm

__all__ = ["LayoutForm"]
