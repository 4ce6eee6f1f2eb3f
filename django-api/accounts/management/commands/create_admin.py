"""Bootstrap an administrator account.

Usage: python manage.py create_admin --email admin@example.com --password secret
"""

from django.core.management.base import BaseCommand, CommandError

from accounts.domain.errors import UserAlreadyExistsError
from accounts.handlers.views import get_account_service


class Command(BaseCommand):
    help = "Create an admin user that can manage events and delete any photo."

    def add_arguments(self, parser):
        parser.add_argument("--email", required=True)
        parser.add_argument("--password", required=True)
        parser.add_argument("--name", default=None)

    def handle(self, *args, **options):
        try:
            user = get_account_service().create_admin(
                email=options["email"],
                password=options["password"],
                name=options["name"],
            )
        except UserAlreadyExistsError as exc:
            raise CommandError(f"{exc.message}: {exc.email}")
        self.stdout.write(self.style.SUCCESS(f"Created admin {user.email} ({user.id})"))
