from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from users.models import User


class Command(BaseCommand):
    help = "Create the storefront admin account from ADMIN_NAME / ADMIN_EMAIL / ADMIN_PASSWORD."

    def add_arguments(self, parser):
        parser.add_argument("--name", default=None)
        parser.add_argument("--email", default=None)
        parser.add_argument("--password", default=None)

    def handle(self, *args, **options):
        name = options["name"] or settings.ADMIN_NAME
        email = options["email"] or settings.ADMIN_EMAIL
        password = options["password"] or settings.ADMIN_PASSWORD

        if not (email and password):
            raise CommandError("ADMIN_EMAIL and ADMIN_PASSWORD must be set.")

        if User.objects.filter(email=email.lower()).exists():
            self.stdout.write(self.style.WARNING("Admin already exists."))
            return

        user = User.objects.create_superuser(email=email, password=password, first_name=name)
        self.stdout.write(self.style.SUCCESS(f"Created admin user: {user.id} {user.email}"))
