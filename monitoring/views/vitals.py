"""
Vital sign endpoints.

Reads are open to both roles; creating, replacing and deleting vitals
requires Admin.  Vitals are also written by the background simulator.
"""
from __future__ import annotations

from django.db import DatabaseError
from drf_yasg.utils import swagger_auto_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from monitoring.exceptions import ConcurrencyConflict
from monitoring.models import Vital
from monitoring.pagination import paginate
from monitoring.permissions import IsAdminOrReadOnly
from monitoring.serializers.vital import VitalSerializer
from monitoring.services.records import record_exists, save_changes
from .common import PAGE_PARAMS, created, ensure_body_id_matches, no_content, not_found, storage_failure


@swagger_auto_schema(method='get', manual_parameters=PAGE_PARAMS, responses={200: VitalSerializer(many=True)})
@swagger_auto_schema(method='post', request_body=VitalSerializer, responses={201: VitalSerializer})
@api_view(['GET', 'POST'])
@permission_classes([IsAdminOrReadOnly])
def vitals(request):
    if request.method == 'GET':
        return paginate(Vital.objects.order_by('id'), request, VitalSerializer)

    s = VitalSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    try:
        vital = s.save()
    except DatabaseError:
        return storage_failure('An error occurred while saving the vital.')
    return created(request, 'vital_detail', vital.pk, s.data)


@swagger_auto_schema(method='put', request_body=VitalSerializer)
@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAdminOrReadOnly])
def vital_detail(request, pk: int):
    if request.method == 'GET':
        vital = Vital.objects.filter(pk=pk).first()
        if vital is None:
            return not_found()
        return Response(VitalSerializer(vital).data)

    if request.method == 'PUT':
        ensure_body_id_matches(request, pk)
        if not record_exists(Vital, pk):
            return not_found()
        s = VitalSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        try:
            save_changes(Vital, pk, s.validated_data)
        except ConcurrencyConflict:
            if not record_exists(Vital, pk):
                return not_found()
            raise
        return no_content()

    vital = Vital.objects.filter(pk=pk).first()
    if vital is None:
        return not_found()
    try:
        vital.delete()
    except DatabaseError:
        return storage_failure('An error occurred while deleting the vital.')
    return no_content()


@swagger_auto_schema(method='get', responses={200: VitalSerializer(many=True)})
@api_view(['GET'])
@permission_classes([IsAdminOrReadOnly])
def patient_vitals(request, patient_id: int):
    """Vitals recorded for a patient; an unknown patient yields an empty list."""
    qs = Vital.objects.filter(patient_id=patient_id).order_by('id')
    return Response(VitalSerializer(qs, many=True).data)
