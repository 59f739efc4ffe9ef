import logging
from dataclasses import dataclass, replace

from ..course_map import CourseLocator, get_course_mapping, lesson_count
from ..exceptions import CourseIncomplete, LessonLocked, UnknownCourse
from ..flags import UserFlags
from ..models import LessonCompletion
from ..roles import SectionId, normalize_section
from .access import is_lesson_unlocked
from .repositories import FlagsRepository

logger = logging.getLogger(__name__)

BLUEPRINT_COURSE_INDEX = 1


@dataclass(frozen=True)
class LessonStatus:
    locator: CourseLocator
    lesson_index: int
    prior_lessons_completed: int
    unlocked: bool


def _resolve(slug) -> CourseLocator:
    locator = get_course_mapping(slug)
    if locator is None:
        raise UnknownCourse(slug)
    return locator


def prior_lessons_completed(user, course_id) -> int:
    """
    Lecciones completadas en ESTE curso (conteo por curso, no global).
    Anónimos: 0.
    """
    if not getattr(user, "is_authenticated", False):
        return 0
    return LessonCompletion.objects.filter(user=user, course_id=course_id).count()


def lesson_status(user, flags: UserFlags, slug, lesson_index: int) -> LessonStatus:
    """Estado de una lección con el progreso real del usuario. Lanza UnknownCourse."""
    locator = _resolve(slug)
    prior = prior_lessons_completed(user, locator.course_id)
    unlocked = is_lesson_unlocked(flags, locator, lesson_index, prior)

    total = lesson_count(locator.course_id)
    if total is not None and isinstance(lesson_index, int) and lesson_index > total:
        unlocked = False
    return LessonStatus(locator, lesson_index, prior, unlocked)


def record_lesson_completion(user, slug, lesson_index: int, flags: UserFlags) -> LessonCompletion:
    """Registra la lección solo si hoy está desbloqueada. Idempotente."""
    status = lesson_status(user, flags, slug, lesson_index)
    if not status.unlocked:
        raise LessonLocked(status.locator.course_id, lesson_index)

    completion, created = LessonCompletion.objects.get_or_create(
        user=user, course_id=status.locator.course_id, lesson_index=lesson_index,
    )
    if created:
        logger.info("User %s completed %s lesson %s", user.pk, completion.course_id, lesson_index)
    return completion


def is_blueprint_course(locator: CourseLocator) -> bool:
    return (
        normalize_section(locator.section_id) == SectionId.FOUNDATION
        and locator.course_index == BLUEPRINT_COURSE_INDEX
    )


def mark_course_completed(user, repo: FlagsRepository, slug) -> bool:
    """
    Marca el fin de un curso. Solo el curso 1 de la sección 1 deja huella
    (blueprint_done), y solo con todas sus lecciones completadas; si faltan
    lanza CourseIncomplete. Devuelve True si cambió algún flag.
    """
    locator = _resolve(slug)
    if not is_blueprint_course(locator):
        return False

    required = lesson_count(locator.course_id) or 0
    completed = 0
    if getattr(user, "is_authenticated", False):
        completed = LessonCompletion.objects.filter(
            user=user, course_id=locator.course_id, lesson_index__lte=required,
        ).count()
    if required < 1 or completed < required:
        raise CourseIncomplete(locator.course_id, completed, required)

    flags = repo.load()
    if flags.blueprint_done:
        return False
    repo.save(replace(flags, blueprint_done=True))
    logger.info("Blueprint course finished (%s)", locator.course_id)
    return True


def press_not_ready(repo: FlagsRepository) -> bool:
    """Flag 'Not Ready Yet' (una sola vía). Devuelve True si cambió."""
    flags = repo.load()
    if flags.pressed_not_ready:
        return False
    repo.save(replace(flags, pressed_not_ready=True))
    return True
