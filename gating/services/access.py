"""
Reglas de acceso a cursos y lecciones (única fuente de verdad).

    Rol          | Sección 1             | Sección 2    | Sección 3
    -------------+-----------------------+--------------+-------------
    free/trial/  | C1: secuencial        | Upgrade CTA  | Compra
    downsell     | C2: L1 si "not ready" |              |
                 | C3: bloqueado         |              |
    monthly/     | todo                  | todo         | Compra
    annual/admin |                       |              |

Funciones puras: no tocan la base ni la sesión, no lanzan. Ante un dato
desconocido (sección, índice, rol) la respuesta es siempre "bloqueado".
"""
import math
from dataclasses import dataclass

from django.db import models

from ..course_map import CourseLocator
from ..flags import UserFlags
from ..roles import SectionId, is_premium, is_trial_like, normalize_section

SECTION_1_COURSES = (1, 2, 3)


class AccessDecision(models.TextChoices):
    UNLOCKED = "unlocked", "Unlocked"
    LOCKED_UPGRADE = "locked-upgrade", "Upgrade required"
    LOCKED_PROGRESS = "locked-progress", "Progress required"
    LOCKED_PURCHASE = "locked-purchase", "Purchase required"


@dataclass(frozen=True)
class CourseAccess:
    locator: CourseLocator
    decision: AccessDecision
    can_start: bool

    @property
    def is_locked(self) -> bool:
        return self.decision != AccessDecision.UNLOCKED


def _course_index(locator: CourseLocator):
    idx = locator.course_index
    if isinstance(idx, bool) or idx not in SECTION_1_COURSES:
        return None
    return idx


def _prior_count(value) -> int:
    # Conteo no interpretable (texto, bool, nan, inf) => 0 lecciones previas
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(0, value)
    if isinstance(value, float) and math.isfinite(value):
        return max(0, int(value))
    return 0


def can_see_section(section_id) -> bool:
    """Todas las secciones conocidas son visibles (aunque pidan upgrade/compra)."""
    return normalize_section(section_id) is not None


def requires_purchase_masterclass(course_id, flags: UserFlags) -> bool:
    return not flags.has_purchased(course_id)


def can_start_course(flags: UserFlags, locator: CourseLocator) -> bool:
    """¿Puede entrar al curso sin pasar por upgrade/compra?"""
    section = normalize_section(locator.section_id)

    if section == SectionId.FOUNDATION:
        if is_premium(flags.role):
            return True
        idx = _course_index(locator)
        if idx == 1:
            return True
        if idx == 2:
            return flags.blueprint_done or flags.pressed_not_ready
        return False  # curso 3 o índice inválido

    if section == SectionId.PREMIUM:
        return is_premium(flags.role)

    if section == SectionId.MASTERCLASS:
        # Ni premium ni progreso: solo la compra individual
        return flags.has_purchased(locator.course_id)

    return False


def is_lesson_unlocked(flags: UserFlags, locator: CourseLocator, lesson_index,
                       prior_lessons_completed=0) -> bool:
    """
    lesson_index es 1-based. prior_lessons_completed lo aporta quien lleva
    el progreso (lecciones completadas en ESTE curso).
    """
    if isinstance(lesson_index, bool) or not isinstance(lesson_index, int) or lesson_index < 1:
        return False
    if not can_start_course(flags, locator):
        return False

    section = normalize_section(locator.section_id)
    prior = _prior_count(prior_lessons_completed)

    if section == SectionId.FOUNDATION:
        if is_premium(flags.role):
            return True
        idx = _course_index(locator)
        if idx == 1:
            return lesson_index <= prior + 1
        if idx == 2:
            if flags.blueprint_done:
                return lesson_index <= prior + 1
            # solo "Not Ready Yet": únicamente la lección 1
            return lesson_index == 1
        return False

    # Sección 2 (premium) y 3 (comprada): si puede empezar, todo abierto
    return section in (SectionId.PREMIUM, SectionId.MASTERCLASS)


def requires_upgrade_cta(flags: UserFlags, locator: CourseLocator) -> bool:
    section = normalize_section(locator.section_id)

    if section == SectionId.FOUNDATION:
        if is_premium(flags.role):
            return False
        idx = _course_index(locator)
        return idx is None or idx == 3

    if section == SectionId.PREMIUM:
        return is_trial_like(flags.role)

    if section == SectionId.MASTERCLASS:
        return False  # la sección 3 usa CTA de compra

    return True  # sección desconocida: lo más restrictivo


def course_lock_state(flags: UserFlags, locator: CourseLocator) -> AccessDecision:
    """
    Único lugar que convierte las reglas en un AccessDecision.
    Precedencia: compra > upgrade > progreso > desbloqueado.
    """
    section = normalize_section(locator.section_id)

    if section == SectionId.MASTERCLASS:
        if requires_purchase_masterclass(locator.course_id, flags):
            return AccessDecision.LOCKED_PURCHASE
        return AccessDecision.UNLOCKED

    if section is None or requires_upgrade_cta(flags, locator):
        return AccessDecision.LOCKED_UPGRADE

    if not can_start_course(flags, locator):
        return AccessDecision.LOCKED_PROGRESS

    return AccessDecision.UNLOCKED


def evaluate_course(flags: UserFlags, locator: CourseLocator) -> CourseAccess:
    return CourseAccess(
        locator=locator,
        decision=course_lock_state(flags, locator),
        can_start=can_start_course(flags, locator),
    )
