"""Helpers shared by the resource views."""
from __future__ import annotations

import logging

from django.urls import reverse
from drf_yasg import openapi
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

logger = logging.getLogger("monitoring.api")

PAGE_PARAMS = [
    openapi.Parameter('pageNumber', openapi.IN_QUERY, type=openapi.TYPE_INTEGER, default=1),
    openapi.Parameter('pageSize', openapi.IN_QUERY, type=openapi.TYPE_INTEGER, default=10),
]


def ensure_body_id_matches(request, pk: int) -> None:
    """Reject updates whose body ``id`` differs from the route id."""
    raw = request.data.get('id') if hasattr(request.data, 'get') else None
    if isinstance(raw, str) and raw.isascii() and raw.isdigit():
        raw = int(raw)
    body_id = raw if isinstance(raw, int) and not isinstance(raw, bool) else None
    if body_id != pk:
        raise ValidationError({'id': ['Route id and body id do not match.']})


def not_found() -> Response:
    return Response(status=status.HTTP_404_NOT_FOUND)


def no_content() -> Response:
    return Response(status=status.HTTP_204_NO_CONTENT)


def created(request, url_name: str, pk: int, data) -> Response:
    location = request.build_absolute_uri(reverse(url_name, args=[pk]))
    return Response(data, status=status.HTTP_201_CREATED, headers={'Location': location})


def storage_failure(message: str) -> Response:
    """500 with a fixed message; the cause is only logged."""
    logger.exception(message)
    return Response(
        {'ok': False, 'error': {'code': 'server_error', 'message': message}},
        status=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
