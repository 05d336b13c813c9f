from unittest import mock

import pytest
from django.db import DatabaseError

from monitoring.models import MedicalDevice, Patient, Vital
from monitoring.serializers.device import MedicalDeviceSerializer

pytestmark = pytest.mark.django_db


@pytest.fixture
def monitor():
    return MedicalDevice.objects.create(device_name='Heart Monitor A100', device_type='Heart Rate Monitor')


@pytest.fixture
def patient():
    return Patient.objects.create(full_name='Alice Thompson', age=45)


def test_create_device_round_trip(doctor_client):
    r = doctor_client.post('/api/medicaldevices', {'deviceName': 'Cuff X2', 'deviceType': 'Blood Pressure Monitor'}, format='json')
    assert r.status_code == 201
    assert r['Location'].endswith(f"/api/medicaldevices/{r.data['id']}")
    got = doctor_client.get(f"/api/medicaldevices/{r.data['id']}")
    assert got.status_code == 200
    assert got.data == {'id': r.data['id'], 'deviceName': 'Cuff X2', 'deviceType': 'Blood Pressure Monitor'}


def test_create_requires_name_and_type(doctor_client):
    r = doctor_client.post('/api/medicaldevices', {'deviceName': '  '}, format='json')
    assert r.status_code == 400
    assert set(r.data['error']['fields']) == {'deviceName', 'deviceType'}


def test_storage_failure_on_create_is_generic_500(doctor_client):
    with mock.patch.object(MedicalDeviceSerializer, 'save', side_effect=DatabaseError('disk I/O error at /var/db')):
        r = doctor_client.post('/api/medicaldevices', {'deviceName': 'A', 'deviceType': 'B'}, format='json')
    assert r.status_code == 500
    assert r.data['error']['message'] == 'An error occurred while saving the device.'
    assert '/var/db' not in str(r.data)


def test_user_reads_but_cannot_write(viewer_client, monitor):
    assert viewer_client.get('/api/medicaldevices').status_code == 200
    assert viewer_client.get(f'/api/medicaldevices/{monitor.id}').status_code == 200
    assert viewer_client.get(f'/api/medicaldevices/{monitor.id}/vitals').status_code == 200
    body = {'id': monitor.id, 'deviceName': 'X', 'deviceType': 'Y'}
    assert viewer_client.put(f'/api/medicaldevices/{monitor.id}', body, format='json').status_code == 403
    assert viewer_client.delete(f'/api/medicaldevices/{monitor.id}').status_code == 403
    assert viewer_client.post(f'/api/medicaldevices/{monitor.id}/vitals', {}, format='json').status_code == 403


def test_list_has_pagination_headers(doctor_client, monitor):
    MedicalDevice.objects.create(device_name='Cuff X2', device_type='Blood Pressure Monitor')
    r = doctor_client.get('/api/medicaldevices?pageSize=1&pageNumber=2')
    assert r.status_code == 200
    assert r['X-Total-Count'] == '2'
    assert r['X-Page-Number'] == '2'
    assert r['X-Page-Size'] == '1'
    assert [d['deviceName'] for d in r.data] == ['Cuff X2']


def test_update_device(doctor_client, monitor):
    body = {'id': monitor.id, 'deviceName': 'Heart Monitor A200', 'deviceType': 'Heart Rate Monitor'}
    r = doctor_client.put(f'/api/medicaldevices/{monitor.id}', body, format='json')
    assert r.status_code == 204
    monitor.refresh_from_db()
    assert monitor.device_name == 'Heart Monitor A200'


def test_update_device_mismatch_and_missing(doctor_client, monitor):
    body = {'id': monitor.id + 1, 'deviceName': 'Renamed', 'deviceType': 'T'}
    assert doctor_client.put(f'/api/medicaldevices/{monitor.id}', body, format='json').status_code == 400
    monitor.refresh_from_db()
    assert monitor.device_name == 'Heart Monitor A100'

    body = {'id': 4242, 'deviceName': 'Ghost', 'deviceType': 'T'}
    assert doctor_client.put('/api/medicaldevices/4242', body, format='json').status_code == 404


def test_device_vitals_listing(doctor_client, monitor, patient):
    assert doctor_client.get(f'/api/medicaldevices/{monitor.id}/vitals').data == []
    assert doctor_client.get('/api/medicaldevices/777/vitals').status_code == 404

    other = MedicalDevice.objects.create(device_name='Cuff X2', device_type='Blood Pressure Monitor')
    mine = Vital.objects.create(patient=patient, medical_device=monitor, heart_rate=70)
    Vital.objects.create(patient=patient, medical_device=other, heart_rate=80)
    r = doctor_client.get(f'/api/medicaldevices/{monitor.id}/vitals')
    assert [v['id'] for v in r.data] == [mine.id]


def test_add_vital_to_device_uses_route_device(doctor_client, monitor, patient):
    other = MedicalDevice.objects.create(device_name='Cuff X2', device_type='Blood Pressure Monitor')
    body = {'patientId': patient.id, 'medicalDeviceId': other.id, 'heartRate': 88}
    r = doctor_client.post(f'/api/medicaldevices/{monitor.id}/vitals', body, format='json')
    assert r.status_code == 201
    assert r.data['medicalDeviceId'] == monitor.id
    assert r['Location'].endswith(f'/api/medicaldevices/{monitor.id}/vitals')
    assert Vital.objects.get(pk=r.data['id']).medical_device_id == monitor.id

    assert doctor_client.post('/api/medicaldevices/999/vitals', body, format='json').status_code == 404


def test_delete_device_cascades_to_vitals(doctor_client, monitor, patient):
    v1 = Vital.objects.create(patient=patient, medical_device=monitor)
    v2 = Vital.objects.create(patient=patient, medical_device=monitor)
    r = doctor_client.delete(f'/api/medicaldevices/{monitor.id}')
    assert r.status_code == 204
    assert doctor_client.get(f'/api/medicaldevices/{monitor.id}').status_code == 404
    for v in (v1, v2):
        assert doctor_client.get(f'/api/vitals/{v.id}').status_code == 404
    assert doctor_client.get(f'/api/vitals/patient/{patient.id}').data == []


def test_delete_missing_device_is_404(doctor_client):
    assert doctor_client.delete('/api/medicaldevices/31337').status_code == 404
