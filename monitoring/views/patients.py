"""
Patient endpoints.

Both roles may list and read patients; creating, replacing and deleting
them requires the Admin role.  Deleting a patient does not delete its
vitals.
"""
from __future__ import annotations

from django.db import DatabaseError
from drf_yasg.utils import swagger_auto_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from monitoring.exceptions import ConcurrencyConflict
from monitoring.models import Patient
from monitoring.pagination import paginate
from monitoring.permissions import IsAdminOrReadOnly
from monitoring.serializers.patient import PatientSerializer
from monitoring.services.records import record_exists, save_changes
from .common import PAGE_PARAMS, created, ensure_body_id_matches, no_content, not_found, storage_failure


@swagger_auto_schema(method='get', manual_parameters=PAGE_PARAMS, responses={200: PatientSerializer(many=True)})
@swagger_auto_schema(method='post', request_body=PatientSerializer, responses={201: PatientSerializer})
@api_view(['GET', 'POST'])
@permission_classes([IsAdminOrReadOnly])
def patients(request):
    if request.method == 'GET':
        return paginate(Patient.objects.order_by('id'), request, PatientSerializer)

    s = PatientSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    try:
        patient = s.save()
    except DatabaseError:
        return storage_failure('An error occurred while saving the patient.')
    return created(request, 'patient_detail', patient.pk, s.data)


@swagger_auto_schema(method='put', request_body=PatientSerializer)
@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAdminOrReadOnly])
def patient_detail(request, pk: int):
    if request.method == 'GET':
        patient = Patient.objects.filter(pk=pk).first()
        if patient is None:
            return not_found()
        return Response(PatientSerializer(patient).data)

    if request.method == 'PUT':
        ensure_body_id_matches(request, pk)
        if not record_exists(Patient, pk):
            return not_found()
        s = PatientSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        try:
            save_changes(Patient, pk, s.validated_data)
        except ConcurrencyConflict:
            if not record_exists(Patient, pk):
                return not_found()
            raise
        return no_content()

    patient = Patient.objects.filter(pk=pk).first()
    if patient is None:
        return not_found()
    try:
        patient.delete()
    except DatabaseError:
        return storage_failure('An error occurred while deleting the patient.')
    return no_content()
