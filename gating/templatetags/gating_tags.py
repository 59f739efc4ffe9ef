from django import template

from ..course_map import SECTION_NAMES
from ..roles import normalize_section
from ..services.lock_messages import get_lock_message, get_upgrade_cta_text

register = template.Library()


@register.filter
def lock_message(decision, role="") -> str:
    """{{ course.decision|lock_message:flags.role }}"""
    return get_lock_message(decision, role)


@register.filter
def upgrade_cta(role) -> str:
    return get_upgrade_cta_text(role)


@register.filter
def section_name(section_id) -> str:
    section = normalize_section(section_id)
    return SECTION_NAMES.get(section, "") if section else ""
