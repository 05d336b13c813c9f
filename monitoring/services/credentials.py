"""
Credential verification for the login endpoint.

Two interchangeable verifiers exist.  ``StaticCredentialVerifier`` holds
the two demo logins; ``StoreCredentialVerifier`` checks Django's user
table and takes the role from the user's auth group.  The active one is
chosen with the ``CREDENTIAL_VERIFIER`` setting.

Neither verifier attempts to hide timing differences between unknown
usernames and wrong passwords.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from django.conf import settings
from django.contrib.auth import authenticate
from django.utils.module_loading import import_string

from monitoring.permissions import ADMIN, USER

DEMO_ACCOUNTS = {
    "doctor": ("med123", ADMIN),
    "user": ("userpass", USER),
}


@dataclass(frozen=True)
class Identity:
    username: str
    role: str


class CredentialVerifier:
    def verify(self, username: str, password: str, request=None) -> Optional[Identity]:
        raise NotImplementedError


class StaticCredentialVerifier(CredentialVerifier):
    """Fixed username/password/role table."""

    def __init__(self, accounts: dict[str, tuple[str, str]] | None = None):
        self.accounts = DEMO_ACCOUNTS if accounts is None else accounts

    def verify(self, username, password, request=None):
        entry = self.accounts.get(username)
        if entry is None or entry[0] != password:
            return None
        return Identity(username=username, role=entry[1])


class StoreCredentialVerifier(CredentialVerifier):
    """Django user store; the role is the name of the user's auth group."""

    role_precedence = (ADMIN, USER)

    def verify(self, username, password, request=None):
        user = authenticate(request, username=username, password=password)
        if user is None:
            return None
        groups = set(user.groups.values_list("name", flat=True))
        for role in self.role_precedence:
            if role in groups:
                return Identity(username=user.get_username(), role=role)
        return None


def get_credential_verifier() -> CredentialVerifier:
    return import_string(settings.CREDENTIAL_VERIFIER)()
