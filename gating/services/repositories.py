"""
Repositorios de UserFlags: de dónde sale (y a dónde vuelve) la foto de
flags que consume el evaluador. El evaluador nunca toca el storage.
"""
import json
import logging

from django.conf import settings
from django.db import transaction

from ..exceptions import FlagsReadOnly
from ..flags import ANONYMOUS_FLAGS, UserFlags
from ..models import LessonCompletion, MasterclassPurchase, MemberProfile
from ..roles import Role

logger = logging.getLogger(__name__)


class FlagsRepository:
    def load(self) -> UserFlags:
        raise NotImplementedError

    def save(self, flags: UserFlags) -> None:
        raise NotImplementedError

    def reset(self) -> None:
        raise NotImplementedError


# =========================
# Base de datos (MemberProfile + MasterclassPurchase)
# =========================
class ProfileFlagsRepository(FlagsRepository):
    def __init__(self, user):
        self.user = user

    @property
    def is_authenticated(self) -> bool:
        return bool(getattr(self.user, "is_authenticated", False))

    def _profile(self):
        profile, _ = MemberProfile.objects.get_or_create(user=self.user)
        return profile

    def load(self) -> UserFlags:
        if not self.is_authenticated:
            return ANONYMOUS_FLAGS
        profile = self._profile()
        purchased = MasterclassPurchase.objects.filter(user=self.user).values_list("course_id", flat=True)
        return UserFlags(
            role=profile.role,
            pressed_not_ready=profile.pressed_not_ready,
            blueprint_done=profile.blueprint_done,
            purchased_masterclasses=frozenset(purchased),
        )

    def save(self, flags: UserFlags) -> None:
        """
        pressed_not_ready no se limpia nunca desde acá (solo reset) y las
        compras solo se agregan.
        """
        if not self.is_authenticated:
            raise FlagsReadOnly("No se pueden guardar flags de un usuario anónimo.")

        with transaction.atomic():
            profile = self._profile()
            profile.role = flags.role
            profile.pressed_not_ready = profile.pressed_not_ready or flags.pressed_not_ready
            profile.blueprint_done = flags.blueprint_done
            profile.save()

            for course_id in flags.purchased_masterclasses:
                MasterclassPurchase.objects.get_or_create(user=self.user, course_id=course_id)

        logger.info(
            "Saved flags for user=%s role=%s not_ready=%s blueprint=%s",
            self.user.pk, profile.role, profile.pressed_not_ready, profile.blueprint_done,
        )

    def reset(self) -> None:
        """
        Reset de cuenta: borra flags de progresión y lecciones completadas.
        El rol y las compras se mantienen (vienen de facturación).
        """
        if not self.is_authenticated:
            raise FlagsReadOnly("No se puede resetear un usuario anónimo.")

        with transaction.atomic():
            profile = self._profile()
            profile.pressed_not_ready = False
            profile.blueprint_done = False
            profile.save(update_fields=["pressed_not_ready", "blueprint_done", "updated_at"])
            LessonCompletion.objects.filter(user=self.user).delete()

        logger.info("Reset gating flags for user=%s", self.user.pk)


# =========================
# Sesión (override de QA / role switcher)
# =========================
ROLE_KEY = "dev.role"
NOT_READY_KEY = "flags.pressedNotReady"
BLUEPRINT_KEY = "flags.blueprintDone"
PURCHASED_KEY = "purchasedMasterclasses"

SESSION_KEYS = (ROLE_KEY, NOT_READY_KEY, BLUEPRINT_KEY, PURCHASED_KEY)


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    return str(value or "").strip().lower() == "true"


def _parse_purchased(raw) -> frozenset:
    if not raw:
        return frozenset()
    try:
        data = json.loads(raw) if isinstance(raw, str) else raw
    except ValueError:
        logger.warning("Malformed %s in session: %r", PURCHASED_KEY, raw)
        return frozenset()
    if not isinstance(data, (list, tuple)):
        logger.warning("Unexpected %s in session: %r", PURCHASED_KEY, raw)
        return frozenset()
    return frozenset(str(c) for c in data if isinstance(c, str) and c)


class SessionFlagsRepository(FlagsRepository):
    """
    Mismo formato clave/valor que usa el front: booleans como "true"/"false"
    y la lista de masterclasses como JSON. Todo lo malformado cae cerrado.
    """

    def __init__(self, session):
        self.session = session

    def is_active(self) -> bool:
        return ROLE_KEY in self.session

    def load(self) -> UserFlags:
        return UserFlags(
            role=self.session.get(ROLE_KEY, Role.FREE),
            pressed_not_ready=_parse_bool(self.session.get(NOT_READY_KEY)),
            blueprint_done=_parse_bool(self.session.get(BLUEPRINT_KEY)),
            purchased_masterclasses=_parse_purchased(self.session.get(PURCHASED_KEY)),
        )

    def save(self, flags: UserFlags) -> None:
        current = self.load() if self.is_active() else ANONYMOUS_FLAGS
        self.session[ROLE_KEY] = flags.role.value
        self.session[NOT_READY_KEY] = "true" if (current.pressed_not_ready or flags.pressed_not_ready) else "false"
        self.session[BLUEPRINT_KEY] = "true" if flags.blueprint_done else "false"
        self.session[PURCHASED_KEY] = json.dumps(
            sorted(current.purchased_masterclasses | flags.purchased_masterclasses)
        )
        logger.info("Dev flags override set: role=%s", flags.role.value)

    def reset(self) -> None:
        for key in SESSION_KEYS:
            self.session.pop(key, None)
        logger.info("Dev flags override cleared")


def dev_tools_enabled() -> bool:
    return bool(getattr(settings, "GATING_DEV_TOOLS", False))


def flags_repository_for(request) -> FlagsRepository:
    session_repo = SessionFlagsRepository(request.session)
    if dev_tools_enabled() and session_repo.is_active():
        return session_repo
    return ProfileFlagsRepository(request.user)


def flags_for_request(request) -> UserFlags:
    return flags_repository_for(request).load()
