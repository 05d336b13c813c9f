"""
Database models for the monitoring app.

Three records are stored: patients, the medical devices that take
measurements and the vitals those devices record for a patient.
Deleting a device removes its vitals; deleting a patient leaves its
vitals in place with a dangling ``patient_id``.
"""
from __future__ import annotations

from django.db import models
from django.utils import timezone


class Patient(models.Model):
    """A monitored patient."""
    full_name = models.CharField(max_length=200)
    age = models.PositiveIntegerField(default=0)
    gender = models.CharField(max_length=20, blank=True, default='')
    diagnosis = models.CharField(max_length=255, blank=True, default='')
    last_checkup = models.DateTimeField(null=True, blank=True)

    class Meta:
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.full_name} ({self.id})"


class MedicalDevice(models.Model):
    """A device recording vitals, e.g. a heart rate monitor."""
    device_name = models.CharField(max_length=200)
    device_type = models.CharField(max_length=100)

    class Meta:
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.device_name} [{self.device_type}]"


class Vital(models.Model):
    """One timestamped set of measurements for a patient.

    The patient reference carries no database constraint so that
    historic vitals survive the deletion of their patient.
    """
    patient = models.ForeignKey(
        Patient,
        on_delete=models.DO_NOTHING,
        db_constraint=False,
        related_name='vitals',
    )
    medical_device = models.ForeignKey(
        MedicalDevice, on_delete=models.CASCADE, related_name='vitals'
    )
    timestamp = models.DateTimeField(default=timezone.now, db_index=True)
    heart_rate = models.FloatField(default=0)
    blood_pressure_systolic = models.FloatField(default=0)
    blood_pressure_diastolic = models.FloatField(default=0)
    oxygen_saturation = models.FloatField(default=0)
    temperature = models.FloatField(default=0)

    class Meta:
        ordering = ['id']

    def __str__(self) -> str:
        return f"vital {self.id} patient={self.patient_id} device={self.medical_device_id}"
