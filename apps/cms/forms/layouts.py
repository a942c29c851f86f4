"""Forms for managing layout records."""

from __future__ import annotations

from typing import Any

from crispy_forms.helper import FormHelper
from crispy_forms.layout import Column, Fieldset, Layout as CrispyLayout, Row
from django import forms

from apps.cms.models.layout import Layout
from apps.cms.models.site import Site
from apps.cms.services.layouts import save_layout


class LayoutForm(forms.ModelForm):
    """Model form used to manage :class:`~apps.cms.models.layout.Layout` records."""

    helper: FormHelper

    parent = forms.TypedChoiceField(coerce=int, required=False, empty_value=None)
    app_layout = forms.ChoiceField(required=False)

    class Meta:
        model = Layout
        fields = ["site", "label", "identifier", "parent", "app_layout", "content", "css", "js"]
        widgets = {
            "content": forms.Textarea(attrs={"rows": 16}),
            "css": forms.Textarea(attrs={"rows": 8}),
            "js": forms.Textarea(attrs={"rows": 8}),
        }

    def __init__(self, *args: Any, site=None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        if site is None and self.instance.site_id:
            site = self.instance.site
        if site is not None:
            self.fields["site"].initial = site.pk
            sites = [site]
        else:
            sites = list(Site.objects.all())
        parent_choices = [("", "---------")]
        for owner in sites:
            parent_choices += [
                (pk, label)
                for label, pk in Layout.options_for_select(owner, exclude_layout=self.instance)
            ]
        self.fields["parent"].choices = parent_choices

        self.fields["app_layout"].choices = [("", "---------")] + [
            (name, name) for name in Layout.app_layouts_for_select()
        ]

        self.helper = FormHelper()
        self.helper.form_tag = False
        self.helper.disable_csrf = True
        self.helper.layout = CrispyLayout(
            Fieldset(
                "Layout Details",
                "site",
                Row(
                    Column("label", css_class="col-md-6"),
                    Column("identifier", css_class="col-md-6"),
                ),
                Row(
                    Column("parent", css_class="col-md-6"),
                    Column("app_layout", css_class="col-md-6"),
                ),
            ),
            Fieldset("Content", "content", "css", "js"),
        )

    def clean_parent(self):
        parent_id = self.cleaned_data.get("parent")
        if parent_id is None:
            return None
        try:
            return Layout.objects.get(pk=parent_id)
        except Layout.DoesNotExist:
            raise forms.ValidationError("Select a valid parent layout.")

    def save(self, commit: bool = True) -> Layout:
        instance: Layout = super().save(commit=False)
        if commit:
            save_layout(instance)
        return instance
