# monitoring/management/commands/ensure_demo_users.py
from django.contrib.auth import get_user_model
from django.contrib.auth.models import Group
from django.core.management.base import BaseCommand

from monitoring.permissions import ADMIN, USER
from monitoring.services.credentials import DEMO_ACCOUNTS


class Command(BaseCommand):
    help = "Ensure the demo logins exist in the user store with their role groups (idempotent)."

    def handle(self, *args, **opts):
        User = get_user_model()
        groups = {name: Group.objects.get_or_create(name=name)[0] for name in (ADMIN, USER)}
        for username, (password, role) in DEMO_ACCOUNTS.items():
            u, created = User.objects.get_or_create(username=username, defaults={"is_active": True})
            # reset password, activation and role on every run
            u.set_password(password)
            u.is_active = True
            u.save()
            u.groups.set([groups[role]])
            verb = "created" if created else "updated"
            self.stdout.write(self.style.SUCCESS(f"{verb}: {username} ({role})"))
        self.stdout.write(self.style.SUCCESS("All demo users ensured."))
