from io import StringIO

import pytest
from django.core.management import call_command

from monitoring.models import MedicalDevice, Patient, Vital


@pytest.mark.django_db
def test_seed_demo_data_runs_once():
    out = StringIO()
    call_command('seed_demo_data', stdout=out)
    assert (Patient.objects.count(), MedicalDevice.objects.count(), Vital.objects.count()) == (3, 2, 2)
    assert 'Created 3 patients' in out.getvalue()

    call_command('seed_demo_data', stdout=StringIO())
    assert Patient.objects.count() == 3

    call_command('seed_demo_data', '--force', stdout=StringIO())
    assert Patient.objects.count() == 6


@pytest.mark.django_db
def test_seeded_records_are_served(doctor_client):
    call_command('seed_demo_data', stdout=StringIO())
    alice = Patient.objects.get(full_name='Alice Thompson')
    r = doctor_client.get(f'/api/vitals/patient/{alice.id}')
    assert [v['heartRate'] for v in r.data] == [72.0]


@pytest.mark.django_db(transaction=True)
def test_simulate_vitals_for_fixed_cycles():
    call_command('seed_demo_data', stdout=StringIO())
    out = StringIO()
    call_command('simulate_vitals', '--cycles', '2', '--interval', '0', stdout=out)
    assert Vital.objects.count() == 2 + 2 * 3
    assert 'Completed 2 cycles.' in out.getvalue()
