from dataclasses import dataclass, field

from .roles import Role, normalize_role


@dataclass(frozen=True)
class UserFlags:
    """
    Foto de los flags del usuario para una evaluación.
    Se reconstruye en cada request; el evaluador nunca la modifica.
    """
    role: Role = Role.FREE
    pressed_not_ready: bool = False  # "Not Ready Yet": una sola vía, solo se limpia con reset
    blueprint_done: bool = False  # completó el curso 1 de la sección 1
    purchased_masterclasses: frozenset = field(default_factory=frozenset)

    def __post_init__(self):
        object.__setattr__(self, "role", normalize_role(self.role))
        object.__setattr__(self, "pressed_not_ready", bool(self.pressed_not_ready))
        object.__setattr__(self, "blueprint_done", bool(self.blueprint_done))
        object.__setattr__(
            self,
            "purchased_masterclasses",
            frozenset(str(c) for c in (self.purchased_masterclasses or ())),
        )

    def has_purchased(self, course_id) -> bool:
        return bool(course_id) and course_id in self.purchased_masterclasses


ANONYMOUS_FLAGS = UserFlags()
