from django.conf import settings
from django.db import models
from django.db.models.signals import post_save
from django.dispatch import receiver

from .roles import Role

User = settings.AUTH_USER_MODEL


class TimeStamped(models.Model):
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    class Meta:
        abstract = True


# =========================
# Perfil del miembro (flags de gating)
# =========================
class MemberProfile(TimeStamped):
    """
    Rol + flags de progresión del usuario. Es el almacenamiento; las reglas
    viven en services/access.py y nunca escriben acá.
    """
    user = models.OneToOneField(User, related_name="member_profile", on_delete=models.CASCADE)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.FREE)

    # "Not Ready Yet": una sola vía, solo se limpia con un reset de cuenta
    pressed_not_ready = models.BooleanField(default=False)
    # Completó el curso 1 de la sección 1
    blueprint_done = models.BooleanField(default=False)

    def __str__(self):
        return f"Perfil de {getattr(self.user, 'username', 'user')} ({self.role})"


# Crear el perfil automáticamente al crear un User
@receiver(post_save, sender=settings.AUTH_USER_MODEL)
def create_member_profile(sender, instance, created, **kwargs):
    if created:
        MemberProfile.objects.get_or_create(user=instance)


# =========================
# Compras / Progreso
# =========================
class MasterclassPurchase(TimeStamped):
    """Masterclass (sección 3) comprada individualmente. course_id = slug canónico."""
    user = models.ForeignKey(User, related_name="masterclass_purchases", on_delete=models.CASCADE)
    course_id = models.SlugField(max_length=120)

    class Meta:
        unique_together = ("user", "course_id")

    def __str__(self):
        return f"{self.course_id} ({self.user})"


class LessonCompletion(TimeStamped):
    user = models.ForeignKey(User, related_name="lesson_completions", on_delete=models.CASCADE)
    course_id = models.SlugField(max_length=120)
    lesson_index = models.PositiveIntegerField()

    class Meta:
        unique_together = ("user", "course_id", "lesson_index")
        ordering = ["course_id", "lesson_index"]

    def __str__(self):
        return f"{self.course_id} L{self.lesson_index} ({self.user})"
