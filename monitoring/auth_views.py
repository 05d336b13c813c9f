"""
Authentication views.

``login_view`` checks a username/password pair with the configured
credential verifier and returns a signed bearer token carrying the
user's name and role.  ``secure_vitals_view`` is a probe that succeeds
for any valid token.
"""
from __future__ import annotations

import logging

from drf_yasg.utils import swagger_auto_schema
from rest_framework import status
from rest_framework.decorators import api_view, authentication_classes, permission_classes
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response

from monitoring.serializers.auth import LoginSerializer
from monitoring.services.credentials import get_credential_verifier
from monitoring.services.tokens import issue_token

logger = logging.getLogger("monitoring.auth")


@swagger_auto_schema(method='post', request_body=LoginSerializer, security=[])
@api_view(['POST'])
@authentication_classes([])
@permission_classes([AllowAny])
def login_view(request):
    """
    Accepts ``{"Username": ..., "Password": ...}`` (key case is ignored)
    and returns ``{"token": ...}``.  Any mismatch is a 401 with the same
    message whether the username or the password was wrong.
    """
    s = LoginSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    username = s.validated_data['username']
    password = s.validated_data['password']

    identity = get_credential_verifier().verify(username, password, request=request)
    if identity is None:
        logger.warning("failed login for %r from %s", username, request.META.get('REMOTE_ADDR'))
        return Response({'ok': False, 'detail': 'Invalid credentials'}, status=status.HTTP_401_UNAUTHORIZED)

    logger.info("login ok for %r (%s)", identity.username, identity.role)
    return Response({'token': issue_token(identity.username, identity.role)}, status=200)


@api_view(['GET'])
@permission_classes([IsAuthenticated])
def secure_vitals_view(request):
    return Response("You are authorized!")
