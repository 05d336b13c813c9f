import logging

from rest_framework import exceptions
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

logger = logging.getLogger("monitoring.api")

GENERIC_SERVER_ERROR = "An unexpected error occurred."


class ConcurrencyConflict(Exception):
    """A write affected no row because the record changed underneath it."""

    def __init__(self, model: str, pk):
        super().__init__(f"{model} {pk} was modified or removed concurrently")
        self.model = model
        self.pk = pk


def api_exception_handler(exc, context):
    resp = drf_exception_handler(exc, context)
    if resp is None:
        view = context.get('view')
        logger.error("unhandled error in %s", getattr(view, '__name__', view), exc_info=exc)
        return Response({'ok': False, 'error': {'code': 'server_error', 'message': GENERIC_SERVER_ERROR}}, status=500)
    # normalize response
    if isinstance(exc, exceptions.ValidationError):
        fields = resp.data if isinstance(resp.data, dict) else {'non_field_errors': resp.data}
        body = {'ok': False, 'error': {'code': 'validation_error', 'message': 'Invalid payload', 'fields': fields}}
    else:
        detail = resp.data.get('detail') if isinstance(resp.data, dict) else resp.data
        code = getattr(exc, 'default_code', 'api_error')
        body = {'ok': False, 'error': {'code': code, 'message': str(detail)}}
    resp.data = body
    return resp
