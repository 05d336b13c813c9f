"""
Storage interfaces used by the vital simulator.

The simulator only needs to list patients and devices and to insert a
batch of vitals.  These small interfaces keep it independent of the ORM
so it can run against in-memory fakes; the ``Orm*`` classes are the
production implementations.
"""
from __future__ import annotations

import abc
from typing import Iterable, Sequence

from django.db import transaction

from monitoring.models import MedicalDevice, Patient, Vital


class PatientRepository(abc.ABC):
    @abc.abstractmethod
    def list_all(self) -> Sequence[Patient]:
        ...


class DeviceRepository(abc.ABC):
    @abc.abstractmethod
    def list_all(self) -> Sequence[MedicalDevice]:
        ...


class VitalRepository(abc.ABC):
    @abc.abstractmethod
    def add_batch(self, vitals: Iterable[Vital]) -> list[Vital]:
        """Persist all ``vitals`` or none of them."""


class OrmPatientRepository(PatientRepository):
    def list_all(self):
        return list(Patient.objects.order_by('id'))


class OrmDeviceRepository(DeviceRepository):
    def list_all(self):
        return list(MedicalDevice.objects.order_by('id'))


class OrmVitalRepository(VitalRepository):
    def add_batch(self, vitals):
        with transaction.atomic():
            return Vital.objects.bulk_create(list(vitals))
