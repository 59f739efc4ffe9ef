import logging

from django.db import models

logger = logging.getLogger(__name__)


class Role(models.TextChoices):
    FREE = "free", "Free"
    TRIAL = "trial", "Trial"
    MONTHLY = "monthly", "Monthly"
    ANNUAL = "annual", "Annual"
    DOWNSELL = "downsell", "Downsell"
    ADMIN = "admin", "Admin"


class SectionId(models.TextChoices):
    FOUNDATION = "s1", "Start Here"
    PREMIUM = "s2", "Premium Courses"
    MASTERCLASS = "s3", "Masterclasses"


PREMIUM_ROLES = frozenset({Role.MONTHLY, Role.ANNUAL, Role.ADMIN})
TRIAL_LIKE_ROLES = frozenset({Role.FREE, Role.TRIAL, Role.DOWNSELL})


def normalize_role(value) -> Role:
    """
    Devuelve un Role válido. Solo acepta el valor exacto ("annual", no
    "Annual" ni " annual "); cualquier otro valor (o vacío) cae al rol con
    menos privilegios: nunca lanza, nunca otorga acceso de más.
    """
    if isinstance(value, Role):
        return value
    if isinstance(value, str) and value in Role.values:
        return Role(value)
    if value is not None and value != "":
        logger.warning("Unrecognized role %r, treating as %s", value, Role.FREE.value)
    return Role.FREE


def normalize_section(value):
    """SectionId o None si no es exactamente una sección conocida."""
    if isinstance(value, SectionId):
        return value
    if isinstance(value, str) and value in SectionId.values:
        return SectionId(value)
    return None


def is_premium(role) -> bool:
    return normalize_role(role) in PREMIUM_ROLES


def is_trial_like(role) -> bool:
    return normalize_role(role) in TRIAL_LIKE_ROLES
