"""
Tabla de cursos -> sección/posición. Es configuración, no lógica: el
evaluador solo recibe el CourseLocator ya resuelto.

Sección 1: Start Here (secuencial para trials) Blueprint -> Discovery -> Next Steps
Sección 2: cursos premium (requiere rol premium)
Sección 3: masterclasses (compra individual)
"""
from dataclasses import dataclass
from typing import Optional

from .roles import SectionId, normalize_section


@dataclass(frozen=True)
class CourseLocator:
    section_id: str
    course_index: Optional[int] = None  # solo sección 1
    course_id: str = ""  # slug canónico


# slug canónico -> (sección, índice, alias)
COURSES = {
    # Sección 1
    "business-launch-blueprint": (SectionId.FOUNDATION, 1, ("business-blueprint",)),
    "discovery-process": (SectionId.FOUNDATION, 2, ()),
    "next-steps": (SectionId.FOUNDATION, 3, ()),

    # Sección 2
    "tiktok-mastery": (SectionId.PREMIUM, None, ()),
    "facebook-ads": (SectionId.PREMIUM, None, ("facebook-advertising",)),
    "instagram-growth": (SectionId.PREMIUM, None, ("instagram-marketing",)),
    "sales-funnel-mastery": (SectionId.PREMIUM, None, ()),
    "email-marketing": (SectionId.PREMIUM, None, ("email-marketing-secrets",)),
    "content-creation": (SectionId.PREMIUM, None, ()),
    "lead-generation": (SectionId.PREMIUM, None, ()),
    "automation-systems": (SectionId.PREMIUM, None, ()),
    "advanced-funnel-mastery": (SectionId.PREMIUM, None, ()),

    # Sección 3
    "copywriting-masterclass": (SectionId.MASTERCLASS, None, ()),
    "email-masterclass": (SectionId.MASTERCLASS, None, ()),
    "sales-masterclass": (SectionId.MASTERCLASS, None, ()),
    "funnel-masterclass": (SectionId.MASTERCLASS, None, ()),
    "traffic-masterclass": (SectionId.MASTERCLASS, None, ()),
    "conversion-masterclass": (SectionId.MASTERCLASS, None, ()),
    "scaling-masterclass": (SectionId.MASTERCLASS, None, ()),
    "advanced-strategies": (SectionId.MASTERCLASS, None, ()),
}

# Lecciones por curso de la sección 1 (el cierre del curso exige completarlas todas)
LESSON_COUNTS = {
    "business-launch-blueprint": 3,
    "discovery-process": 5,
    "next-steps": 20,
}

SECTION_NAMES = {
    SectionId.FOUNDATION: "Start Here",
    SectionId.PREMIUM: "Premium Courses",
    SectionId.MASTERCLASS: "Masterclasses",
}

SECTION_DESCRIPTIONS = {
    SectionId.FOUNDATION: "Foundation courses to get you started",
    SectionId.PREMIUM: "Advanced courses for premium members",
    SectionId.MASTERCLASS: "Individual masterclasses for specialized training",
}


def _build_index():
    index = {}
    for course_id, (section, course_index, aliases) in COURSES.items():
        locator = CourseLocator(section_id=section, course_index=course_index, course_id=course_id)
        for slug in (course_id,) + tuple(aliases):
            if slug in index:
                raise ValueError(f"Slug duplicado en la tabla de cursos: {slug}")
            index[slug] = locator
    return index


_INDEX = _build_index()


def _clean(slug) -> str:
    return (slug or "").strip().lower()


def get_course_mapping(slug) -> Optional[CourseLocator]:
    """Locator del curso, o None si el slug no está mapeado (el caller debe denegar)."""
    return _INDEX.get(_clean(slug))


def canonical_course_id(slug) -> Optional[str]:
    locator = get_course_mapping(slug)
    return locator.course_id if locator else None


def is_valid_course(slug) -> bool:
    return _clean(slug) in _INDEX


def courses_by_section(section) -> list:
    """Slugs canónicos de una sección, en el orden de la tabla (sin alias)."""
    section = normalize_section(section)
    if section is None:
        return []
    return [cid for cid, (sec, _, _) in COURSES.items() if sec == section]


def all_locators() -> list:
    return [_INDEX[cid] for cid in COURSES]


def lesson_count(slug) -> Optional[int]:
    """Lecciones del curso, o None si no hay conteo configurado."""
    course_id = canonical_course_id(slug)
    return LESSON_COUNTS.get(course_id) if course_id else None
