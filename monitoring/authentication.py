"""
Bearer token authentication.

Tokens are verified with the shared signing key, issuer and audience
configured in ``SIMPLE_JWT``.  The authenticated user is built from the
token claims alone; there is no user table lookup, so tokens issued by
the static credential table work the same way as those issued for
stored users.
"""
from __future__ import annotations

from django.utils.functional import cached_property
from rest_framework_simplejwt.authentication import JWTStatelessUserAuthentication
from rest_framework_simplejwt.models import TokenUser
from rest_framework_simplejwt.settings import api_settings

ROLE_CLAIM = "role"


class ClaimsUser(TokenUser):
    """Request user backed by the ``name`` and ``role`` claims."""

    @cached_property
    def username(self) -> str:
        return self.token.get(api_settings.USER_ID_CLAIM, "")

    @cached_property
    def role(self) -> str | None:
        return self.token.get(ROLE_CLAIM)

    def __str__(self) -> str:
        return f"{self.username} ({self.role})"


class BearerTokenAuthentication(JWTStatelessUserAuthentication):
    """Stateless JWT authentication using the ``Bearer`` keyword.

    Exists to give the settings a stable import path; the header
    keyword and token class come from ``SIMPLE_JWT``.
    """
    www_authenticate_realm = "api"
