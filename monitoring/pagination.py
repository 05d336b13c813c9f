"""
Page-number pagination reported through response headers.

The body is the plain list of records for the page; the total count and
the effective page number and size travel in ``X-Total-Count``,
``X-Page-Number`` and ``X-Page-Size``.  Missing, non-numeric or
non-positive or out-of-range query values fall back to page 1 of size 10.
"""
from __future__ import annotations

from rest_framework.pagination import BasePagination
from rest_framework.response import Response

DEFAULT_PAGE_NUMBER = 1
DEFAULT_PAGE_SIZE = 10
# Largest accepted page number or size (signed 32-bit)
MAX_PAGE_VALUE = 2**31 - 1


def _positive_int(raw, default: int) -> int:
    try:
        value = int(raw)
    except (TypeError, ValueError):
        return default
    return value if 1 <= value <= MAX_PAGE_VALUE else default


class HeaderPagination(BasePagination):
    page_query_param = 'pageNumber'
    page_size_query_param = 'pageSize'

    def paginate_queryset(self, queryset, request, view=None):
        self.page_number = _positive_int(request.query_params.get(self.page_query_param), DEFAULT_PAGE_NUMBER)
        self.page_size = _positive_int(request.query_params.get(self.page_size_query_param), DEFAULT_PAGE_SIZE)
        self.total_count = queryset.count()
        start = (self.page_number - 1) * self.page_size
        return list(queryset[start:start + self.page_size])

    def get_paginated_response(self, data):
        return Response(data, headers={
            'X-Total-Count': str(self.total_count),
            'X-Page-Number': str(self.page_number),
            'X-Page-Size': str(self.page_size),
        })


def paginate(queryset, request, serializer_class):
    """Serialize one page of ``queryset`` into a header-paginated response."""
    paginator = HeaderPagination()
    page = paginator.paginate_queryset(queryset, request)
    return paginator.get_paginated_response(serializer_class(page, many=True).data)
