# gating/forms.py
from django import forms
from django.core.exceptions import ValidationError

from .course_map import canonical_course_id, get_course_mapping
from .flags import UserFlags
from .roles import Role, SectionId


class DevFlagsForm(forms.Form):
    """Role switcher de QA: arma un UserFlags para el override de sesión."""
    role = forms.ChoiceField(label="Rol", choices=Role.choices)
    pressed_not_ready = forms.BooleanField(label="Not Ready Yet", required=False)
    blueprint_done = forms.BooleanField(label="Blueprint completado", required=False)
    purchased_masterclasses = forms.CharField(
        label="Masterclasses compradas",
        required=False,
        help_text="Slugs separados por coma.",
    )

    def clean_purchased_masterclasses(self):
        raw = self.cleaned_data.get("purchased_masterclasses") or ""
        slugs = [s.strip() for s in raw.split(",") if s.strip()]
        result = set()
        for slug in slugs:
            locator = get_course_mapping(slug)
            if locator is None or locator.section_id != SectionId.MASTERCLASS:
                raise ValidationError(f"'{slug}' no es una masterclass.")
            result.add(canonical_course_id(slug))
        return frozenset(result)

    def to_flags(self) -> UserFlags:
        data = self.cleaned_data
        return UserFlags(
            role=data["role"],
            pressed_not_ready=data["pressed_not_ready"],
            blueprint_done=data["blueprint_done"],
            purchased_masterclasses=data["purchased_masterclasses"],
        )
