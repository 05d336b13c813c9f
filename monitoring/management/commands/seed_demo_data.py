"""
Management command to populate the database with demo records.
"""
from datetime import datetime, timezone as dt_timezone

from django.core.management.base import BaseCommand
from django.db import transaction

from monitoring.models import MedicalDevice, Patient, Vital

PATIENTS = [
    ("Alice Thompson", 45, "Female", "Hypertension", datetime(2024, 6, 1)),
    ("John Smith", 60, "Male", "Diabetes", datetime(2024, 5, 15)),
    ("Linda Park", 32, "Female", "Asthma", datetime(2024, 6, 20)),
]

DEVICES = [
    ("Heart Monitor A100", "Heart Rate Monitor"),
    ("Blood Pressure Cuff X2", "Blood Pressure Monitor"),
]

# (patient index, device index, timestamp, hr, systolic, diastolic, spo2, temp)
VITALS = [
    (0, 0, datetime(2025, 6, 20, 8, 30), 72, 120, 80, 98, 36.6),
    (1, 1, datetime(2025, 6, 20, 8, 45), 75, 130, 85, 97, 37.0),
]


def _utc(dt: datetime) -> datetime:
    return dt.replace(tzinfo=dt_timezone.utc)


class Command(BaseCommand):
    help = 'Populate the database with demo patients, devices and vitals'

    def add_arguments(self, parser):
        parser.add_argument('--force', action='store_true', help='Seed even if patients already exist')

    def handle(self, *args, **options):
        if Patient.objects.exists() and not options['force']:
            self.stdout.write('Patients already present; nothing to do (use --force to add the demo set anyway).')
            return

        with transaction.atomic():
            patients = [
                Patient.objects.create(full_name=name, age=age, gender=gender, diagnosis=diagnosis, last_checkup=_utc(checkup))
                for name, age, gender, diagnosis, checkup in PATIENTS
            ]
            devices = [
                MedicalDevice.objects.create(device_name=name, device_type=kind)
                for name, kind in DEVICES
            ]
            for p_idx, d_idx, ts, hr, sys_bp, dia_bp, spo2, temp in VITALS:
                Vital.objects.create(
                    patient=patients[p_idx],
                    medical_device=devices[d_idx],
                    timestamp=_utc(ts),
                    heart_rate=hr,
                    blood_pressure_systolic=sys_bp,
                    blood_pressure_diastolic=dia_bp,
                    oxygen_saturation=spo2,
                    temperature=temp,
                )

        self.stdout.write(self.style.SUCCESS(
            f'Created {len(patients)} patients, {len(devices)} devices and {len(VITALS)} vitals.'
        ))
