from dataclasses import asdict
from functools import wraps

from django.contrib.auth.decorators import login_required
from django.http import Http404, JsonResponse
from django.views.decorators.http import require_GET, require_POST

from .course_map import (
    SECTION_DESCRIPTIONS,
    SECTION_NAMES,
    courses_by_section,
    get_course_mapping,
)
from .exceptions import CourseIncomplete, LessonLocked, UnknownCourse
from .forms import DevFlagsForm
from .roles import SectionId, normalize_section
from .services.access import AccessDecision, can_see_section, evaluate_course
from .services.repositories import SessionFlagsRepository, dev_tools_enabled, flags_repository_for
from .services.lock_messages import get_lock_message, lock_banner
from .services.progress import (
    lesson_status,
    mark_course_completed,
    press_not_ready,
    prior_lessons_completed,
    record_lesson_completion,
)


# =======================
# Helpers
# =======================
def _course_payload(flags, locator):
    result = evaluate_course(flags, locator)
    section = normalize_section(locator.section_id)
    return {
        "course_id": locator.course_id,
        "section": section.value if section else None,
        "section_name": SECTION_NAMES.get(section, ""),
        "course_index": locator.course_index,
        "decision": result.decision.value,
        "can_start": result.can_start,
        "message": get_lock_message(result.decision, flags.role),
        "banner": asdict(lock_banner(result.decision, flags.role)),
    }


def _unknown_course(slug, flags):
    # Sin mapeo => denegado, nunca "sección 1 por defecto"
    decision = AccessDecision.LOCKED_UPGRADE
    return JsonResponse(
        {
            "course_id": slug,
            "decision": decision.value,
            "can_start": False,
            "message": get_lock_message(decision, flags.role),
            "error": "unknown_course",
        },
        status=404,
    )


def _flags_payload(flags):
    return {
        "role": flags.role.value,
        "pressed_not_ready": flags.pressed_not_ready,
        "blueprint_done": flags.blueprint_done,
        "purchased_masterclasses": sorted(flags.purchased_masterclasses),
    }


# =======================
# CATÁLOGO / ESTADO DE ACCESO
# =======================
@require_GET
def catalog(request):
    flags = flags_repository_for(request).load()
    sections = []
    for section in SectionId:
        if not can_see_section(section):
            continue
        sections.append(
            {
                "id": section.value,
                "name": SECTION_NAMES[section],
                "description": SECTION_DESCRIPTIONS[section],
                "courses": [
                    _course_payload(flags, get_course_mapping(cid))
                    for cid in courses_by_section(section)
                ],
            }
        )
    return JsonResponse({"flags": _flags_payload(flags), "sections": sections})


@require_GET
def course_access(request, slug):
    flags = flags_repository_for(request).load()
    locator = get_course_mapping(slug)
    if locator is None:
        return _unknown_course(slug, flags)
    return JsonResponse(_course_payload(flags, locator))


@require_GET
def lesson_access(request, slug, lesson_index: int):
    flags = flags_repository_for(request).load()
    try:
        status = lesson_status(request.user, flags, slug, lesson_index)
    except UnknownCourse:
        return _unknown_course(slug, flags)

    payload = _course_payload(flags, status.locator)
    payload.update(
        {
            "lesson_index": status.lesson_index,
            "prior_lessons_completed": status.prior_lessons_completed,
            "lesson_unlocked": status.unlocked,
        }
    )
    return JsonResponse(payload)


# =======================
# PROGRESO
# =======================
@login_required
@require_POST
def lesson_complete(request, slug, lesson_index: int):
    flags = flags_repository_for(request).load()
    try:
        completion = record_lesson_completion(request.user, slug, lesson_index, flags)
    except UnknownCourse:
        return _unknown_course(slug, flags)
    except LessonLocked as exc:
        return JsonResponse(
            {"error": "lesson_locked", "course_id": exc.course_id, "lesson_index": exc.lesson_index},
            status=403,
        )

    return JsonResponse(
        {
            "course_id": completion.course_id,
            "lesson_index": completion.lesson_index,
            "prior_lessons_completed": prior_lessons_completed(request.user, completion.course_id),
        }
    )


@login_required
@require_POST
def course_complete(request, slug):
    repo = flags_repository_for(request)
    try:
        changed = mark_course_completed(request.user, repo, slug)
    except UnknownCourse:
        return _unknown_course(slug, repo.load())
    except CourseIncomplete as exc:
        return JsonResponse(
            {
                "error": "course_incomplete",
                "course_id": exc.course_id,
                "lessons_completed": exc.completed,
                "lessons_required": exc.required,
            },
            status=403,
        )
    return JsonResponse({"changed": changed, "flags": _flags_payload(repo.load())})


@login_required
@require_POST
def not_ready(request):
    repo = flags_repository_for(request)
    changed = press_not_ready(repo)
    return JsonResponse({"changed": changed, "flags": _flags_payload(repo.load())})


# =======================
# DEV / QA (override de flags por sesión)
# =======================
def _is_staff(u):
    return u.is_authenticated and u.is_staff


def dev_tools_required(view_func):
    # Primero el interruptor: apagado => 404 para todos; encendido => solo staff
    @wraps(view_func)
    def _wrapped(request, *args, **kwargs):
        if not dev_tools_enabled():
            raise Http404("Dev tools disabled")
        if not _is_staff(request.user):
            raise Http404("Dev tools are staff only")
        return view_func(request, *args, **kwargs)
    return _wrapped


@dev_tools_required
@require_POST
def dev_flags(request):
    form = DevFlagsForm(request.POST)
    if not form.is_valid():
        return JsonResponse({"errors": form.errors.get_json_data()}, status=400)

    repo = SessionFlagsRepository(request.session)
    repo.save(form.to_flags())
    return JsonResponse({"flags": _flags_payload(repo.load())})


@dev_tools_required
@require_POST
def dev_reset(request):
    SessionFlagsRepository(request.session).reset()
    return JsonResponse({"flags": _flags_payload(flags_repository_for(request).load())})
