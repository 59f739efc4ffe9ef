class GatingError(Exception):
    """Base de los errores de la capa de servicios (nunca del evaluador)."""


class UnknownCourse(GatingError):
    def __init__(self, slug):
        super().__init__(f"Curso desconocido: {slug!r}")
        self.slug = slug


class LessonLocked(GatingError):
    def __init__(self, course_id, lesson_index):
        super().__init__(f"Lección {lesson_index} de {course_id} bloqueada")
        self.course_id = course_id
        self.lesson_index = lesson_index


class FlagsReadOnly(GatingError):
    """El repositorio no puede persistir (p.ej. usuario anónimo)."""


class CourseIncomplete(GatingError):
    def __init__(self, course_id, completed, required):
        super().__init__(f"Curso {course_id} incompleto: {completed}/{required} lecciones")
        self.course_id = course_id
        self.completed = completed
        self.required = required
