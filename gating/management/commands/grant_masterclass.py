from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from gating.course_map import get_course_mapping
from gating.models import MasterclassPurchase
from gating.roles import SectionId


class Command(BaseCommand):
    help = "Otorga una masterclass (sección 3) a un usuario, p.ej. tras un pago manual."

    def add_arguments(self, parser):
        parser.add_argument("username")
        parser.add_argument("course")

    def handle(self, *args, **options):
        UserModel = get_user_model()
        user = UserModel.objects.filter(username=options["username"]).first()
        if not user:
            raise CommandError(f"No existe el usuario '{options['username']}'.")

        locator = get_course_mapping(options["course"])
        if locator is None or locator.section_id != SectionId.MASTERCLASS:
            raise CommandError(f"'{options['course']}' no es una masterclass.")

        _, created = MasterclassPurchase.objects.get_or_create(user=user, course_id=locator.course_id)
        if created:
            self.stdout.write(self.style.SUCCESS(f"{locator.course_id} otorgada a {user.username}."))
        else:
            self.stdout.write(f"{user.username} ya tenía {locator.course_id}.")
