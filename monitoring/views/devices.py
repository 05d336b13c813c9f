"""
Medical device endpoints.

Reads are open to Admin and User, writes to Admin.  Deleting a device
also deletes every vital it recorded.
"""
from __future__ import annotations

from django.db import DatabaseError
from drf_yasg.utils import swagger_auto_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from monitoring.exceptions import ConcurrencyConflict
from monitoring.models import MedicalDevice, Vital
from monitoring.pagination import paginate
from monitoring.permissions import IsAdminOrReadOnly
from monitoring.serializers.device import MedicalDeviceSerializer
from monitoring.serializers.vital import VitalSerializer
from monitoring.services.records import record_exists, save_changes
from .common import PAGE_PARAMS, created, ensure_body_id_matches, no_content, not_found, storage_failure


@swagger_auto_schema(method='get', manual_parameters=PAGE_PARAMS, responses={200: MedicalDeviceSerializer(many=True)})
@swagger_auto_schema(method='post', request_body=MedicalDeviceSerializer, responses={201: MedicalDeviceSerializer})
@api_view(['GET', 'POST'])
@permission_classes([IsAdminOrReadOnly])
def devices(request):
    if request.method == 'GET':
        return paginate(MedicalDevice.objects.order_by('id'), request, MedicalDeviceSerializer)

    s = MedicalDeviceSerializer(data=request.data)
    s.is_valid(raise_exception=True)
    try:
        device = s.save()
    except DatabaseError:
        return storage_failure('An error occurred while saving the device.')
    return created(request, 'device_detail', device.pk, s.data)


@swagger_auto_schema(method='put', request_body=MedicalDeviceSerializer)
@api_view(['GET', 'PUT', 'DELETE'])
@permission_classes([IsAdminOrReadOnly])
def device_detail(request, pk: int):
    if request.method == 'GET':
        device = MedicalDevice.objects.filter(pk=pk).first()
        if device is None:
            return not_found()
        return Response(MedicalDeviceSerializer(device).data)

    if request.method == 'PUT':
        ensure_body_id_matches(request, pk)
        if not record_exists(MedicalDevice, pk):
            return not_found()
        s = MedicalDeviceSerializer(data=request.data)
        s.is_valid(raise_exception=True)
        # only the name and type are replaced
        changes = {
            'device_name': s.validated_data['device_name'],
            'device_type': s.validated_data['device_type'],
        }
        try:
            save_changes(MedicalDevice, pk, changes)
        except ConcurrencyConflict:
            if not record_exists(MedicalDevice, pk):
                return not_found()
            raise
        return no_content()

    device = MedicalDevice.objects.filter(pk=pk).first()
    if device is None:
        return not_found()
    try:
        device.delete()
    except DatabaseError:
        return storage_failure('An error occurred while deleting the device.')
    return no_content()


@swagger_auto_schema(method='get', responses={200: VitalSerializer(many=True)})
@swagger_auto_schema(method='post', request_body=VitalSerializer, responses={201: VitalSerializer})
@api_view(['GET', 'POST'])
@permission_classes([IsAdminOrReadOnly])
def device_vitals(request, pk: int):
    """List the vitals recorded by a device, or record a new one on it.

    Unknown devices are a 404 here, unlike the patient-scoped listing.
    """
    if not record_exists(MedicalDevice, pk):
        return not_found()

    if request.method == 'GET':
        vitals = Vital.objects.filter(medical_device_id=pk).order_by('id')
        return Response(VitalSerializer(vitals, many=True).data)

    data = dict(request.data) if hasattr(request.data, 'items') else {}
    data['medicalDeviceId'] = pk
    s = VitalSerializer(data=data)
    s.is_valid(raise_exception=True)
    try:
        s.save()
    except DatabaseError:
        return storage_failure('An error occurred while saving the vital.')
    return created(request, 'device_vitals', pk, s.data)
