from rest_framework_simplejwt.settings import api_settings
from rest_framework_simplejwt.tokens import AccessToken

from monitoring.authentication import ROLE_CLAIM


def issue_token(username: str, role: str) -> str:
    """Return a signed access token carrying the name and role claims.

    Lifetime, issuer and audience come from ``SIMPLE_JWT``.
    """
    token = AccessToken()
    token[api_settings.USER_ID_CLAIM] = username
    token[ROLE_CLAIM] = role
    return str(token)
