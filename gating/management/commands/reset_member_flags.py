from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from gating.services.repositories import ProfileFlagsRepository


class Command(BaseCommand):
    help = "Reset de cuenta: limpia 'Not Ready Yet', blueprint y lecciones completadas."

    def add_arguments(self, parser):
        parser.add_argument("username")

    def handle(self, *args, **options):
        UserModel = get_user_model()
        user = UserModel.objects.filter(username=options["username"]).first()
        if not user:
            raise CommandError(f"No existe el usuario '{options['username']}'.")

        ProfileFlagsRepository(user).reset()
        self.stdout.write(self.style.SUCCESS(f"Flags de {user.username} reseteados."))
