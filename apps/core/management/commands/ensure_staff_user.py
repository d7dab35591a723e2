# PATH: apps/core/management/commands/ensure_staff_user.py
"""
Create or reset a supervisor / manager login (first admin on a fresh database).

- user looked up by national_id (the SPA login key)
- exists -> password / role / name reset
- missing -> created with username = --username or national_id

Usage:
  python manage.py ensure_staff_user --national-id=1234567890 --password=123456
  python manage.py ensure_staff_user --national-id=0987654321 --role=manager --username=manager_admin
"""
from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

STAFF_ROLES = ("supervisor", "manager")


class Command(BaseCommand):
    help = "Ensure a supervisor/manager user exists with the given national id and password."

    def add_arguments(self, parser):
        parser.add_argument(
            "--national-id",
            type=str,
            required=True,
            help="Login national id",
        )
        parser.add_argument(
            "--password",
            type=str,
            default="123456",
            help="Password (default: 123456)",
        )
        parser.add_argument(
            "--role",
            type=str,
            default="supervisor",
            choices=STAFF_ROLES,
            help="supervisor | manager (default: supervisor)",
        )
        parser.add_argument(
            "--username",
            type=str,
            default=None,
            help="Username (default: same as --national-id)",
        )
        parser.add_argument(
            "--name",
            type=str,
            default="",
            help="Display name",
        )

    def handle(self, *args, **options):
        national_id = (options["national_id"] or "").strip()
        if not national_id:
            raise CommandError("--national-id is required")

        password = (options["password"] or "").strip()
        role = options["role"]
        username = (options["username"] or national_id).strip()
        display_name = (options["name"] or "").strip()

        User = get_user_model()

        with transaction.atomic():
            user = User.objects.filter(national_id=national_id).first()
            created = user is None

            if created:
                if User.objects.filter(username=username).exists():
                    raise CommandError(f"username already taken: {username}")
                user = User(username=username, national_id=national_id)

            user.role = role
            user.is_active = True
            user.is_staff = True
            if display_name:
                user.name = display_name
            user.set_password(password)
            user.save()

        if created:
            self.stdout.write(self.style.SUCCESS(f"Created {role}: national_id={national_id}, username={user.username}"))
        else:
            self.stdout.write(self.style.SUCCESS(f"Updated {role}: national_id={national_id}, password reset"))
