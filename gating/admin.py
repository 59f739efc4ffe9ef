from django.contrib import admin
from .models import MemberProfile, MasterclassPurchase, LessonCompletion

# -------------------------
# Perfiles (rol + flags)
# -------------------------
@admin.register(MemberProfile)
class MemberProfileAdmin(admin.ModelAdmin):
    list_display = ("user", "role", "pressed_not_ready", "blueprint_done", "updated_at")
    list_filter = ("role", "pressed_not_ready", "blueprint_done")
    search_fields = ("user__username", "user__email")

# -------------------------
# Compras de masterclasses
# -------------------------
@admin.register(MasterclassPurchase)
class MasterclassPurchaseAdmin(admin.ModelAdmin):
    list_display = ("user", "course_id", "created_at")
    list_filter = ("course_id",)
    search_fields = ("user__username", "course_id")

# -------------------------
# Progreso
# -------------------------
@admin.register(LessonCompletion)
class LessonCompletionAdmin(admin.ModelAdmin):
    list_display = ("user", "course_id", "lesson_index", "created_at")
    list_filter = ("course_id",)
