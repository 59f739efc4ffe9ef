"""
Textos de bloqueo / CTA. Solo una tabla sobre AccessDecision + rol,
sin reglas de negocio.
"""
from dataclasses import dataclass

from ..roles import is_trial_like
from .access import AccessDecision

PROGRESS_MESSAGE = "Complete previous course or choose 'Not Ready Yet' to unlock"
PURCHASE_MESSAGE = "Individual purchase required"


@dataclass(frozen=True)
class LockBanner:
    is_locked: bool
    reason: str = ""
    title: str = ""
    subtext: str = ""
    show_upgrade_cta: bool = False
    upgrade_text: str = ""
    upgrade_action: str = ""  # "premium" | "masterclass" | ""


UNLOCKED_BANNER = LockBanner(is_locked=False)


def _decision(value):
    try:
        return AccessDecision(value)
    except ValueError:
        return None


def get_lock_message(decision, role) -> str:
    """'' para unlocked; nunca vacío para un estado bloqueado."""
    decision = _decision(decision)

    if decision == AccessDecision.UNLOCKED:
        return ""
    if decision == AccessDecision.LOCKED_PROGRESS:
        return PROGRESS_MESSAGE
    if decision == AccessDecision.LOCKED_PURCHASE:
        return PURCHASE_MESSAGE
    if decision == AccessDecision.LOCKED_UPGRADE and is_trial_like(role):
        return "Upgrade to Premium to unlock all courses instantly"
    # locked-upgrade para no-trials, o un valor que no conocemos
    return "Premium membership required"


def get_upgrade_cta_text(role) -> str:
    if is_trial_like(role):
        return "Upgrade to Premium"
    return "Upgrade Required"


def lock_banner(decision, role) -> LockBanner:
    decision = _decision(decision)

    if decision == AccessDecision.UNLOCKED:
        return UNLOCKED_BANNER

    if decision == AccessDecision.LOCKED_PROGRESS:
        return LockBanner(
            is_locked=True,
            reason="sequence",
            title="Course Locked",
            subtext=PROGRESS_MESSAGE,
        )

    if decision == AccessDecision.LOCKED_PURCHASE:
        return LockBanner(
            is_locked=True,
            reason="purchase_required",
            title="Masterclass",
            subtext=PURCHASE_MESSAGE,
            show_upgrade_cta=True,
            upgrade_text="Purchase Masterclass",
            upgrade_action="masterclass",
        )

    return LockBanner(
        is_locked=True,
        reason="premium_required",
        title="Course Locked",
        subtext=get_lock_message(AccessDecision.LOCKED_UPGRADE, role),
        show_upgrade_cta=True,
        upgrade_text=get_upgrade_cta_text(role),
        upgrade_action="premium",
    )
