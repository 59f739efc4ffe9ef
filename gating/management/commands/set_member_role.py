from dataclasses import replace

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError

from gating.roles import Role
from gating.services.repositories import ProfileFlagsRepository


class Command(BaseCommand):
    help = "Cambia el rol de un miembro (free, trial, monthly, annual, downsell, admin)."

    def add_arguments(self, parser):
        parser.add_argument("username")
        parser.add_argument("role", choices=Role.values)

    def handle(self, *args, **options):
        UserModel = get_user_model()
        try:
            user = UserModel.objects.get(username=options["username"])
        except UserModel.DoesNotExist:
            raise CommandError(f"No existe el usuario '{options['username']}'.")

        repo = ProfileFlagsRepository(user)
        repo.save(replace(repo.load(), role=options["role"]))
        self.stdout.write(self.style.SUCCESS(f"{user.username}: rol = {options['role']}"))
