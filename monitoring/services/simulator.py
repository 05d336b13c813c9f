"""
Background generator of synthetic vital signs.

Every ``interval`` seconds the simulator reads the current patients and
devices, fabricates one reading per patient on a randomly chosen device
and stores the batch.  It runs on a daemon thread and stops
cooperatively: the stop signal is checked before each cycle and wakes
the inter-cycle wait, while a batch already being written is allowed to
finish.

A cycle that finds no devices is skipped.  A cycle that fails is logged
and the loop carries on.
"""
from __future__ import annotations

import atexit
import logging
import random
import threading
from typing import Callable, Optional

from django.conf import settings
from django.db import close_old_connections
from django.utils import timezone

from monitoring.models import Vital
from monitoring.services.repositories import (
    DeviceRepository,
    OrmDeviceRepository,
    OrmPatientRepository,
    OrmVitalRepository,
    PatientRepository,
    VitalRepository,
)

logger = logging.getLogger("monitoring.simulator")

DEFAULT_INTERVAL = 10.0

# Half-open [low, high) ranges
HEART_RATE = (60, 100)
SYSTOLIC = (110, 140)
DIASTOLIC = (70, 90)
OXYGEN_SATURATION = (95, 100)
TEMPERATURE = (36.0, 38.0)


class VitalSimulator:
    def __init__(
        self,
        patients: PatientRepository,
        devices: DeviceRepository,
        vitals: VitalRepository,
        *,
        interval: float = DEFAULT_INTERVAL,
        rng: Optional[random.Random] = None,
        cycle_cleanup: Optional[Callable[[], None]] = None,
    ):
        self.patients = patients
        self.devices = devices
        self.vitals = vitals
        self.interval = interval
        self.rng = rng or random.Random()
        self.cycle_cleanup = cycle_cleanup
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    # ------------------------------------------------------------------
    # One cycle
    # ------------------------------------------------------------------
    def make_vital(self, patient, device, now) -> Vital:
        rng = self.rng
        return Vital(
            patient_id=patient.id,
            medical_device_id=device.id,
            timestamp=now,
            heart_rate=rng.randrange(*HEART_RATE),
            blood_pressure_systolic=rng.randrange(*SYSTOLIC),
            blood_pressure_diastolic=rng.randrange(*DIASTOLIC),
            oxygen_saturation=rng.randrange(*OXYGEN_SATURATION),
            temperature=TEMPERATURE[0] + rng.random() * (TEMPERATURE[1] - TEMPERATURE[0]),
        )

    def run_cycle(self) -> list[Vital]:
        """Generate and store one reading per patient. Returns the stored rows."""
        patients = self.patients.list_all()
        devices = self.devices.list_all()
        if not devices:
            logger.warning("no medical devices registered; skipping cycle for %d patients", len(patients))
            return []
        if not patients:
            return []
        now = timezone.now()
        batch = [self.make_vital(p, self.rng.choice(devices), now) for p in patients]
        stored = self.vitals.add_batch(batch)
        logger.debug("stored %d simulated vitals", len(stored))
        return stored

    # ------------------------------------------------------------------
    # Loop
    # ------------------------------------------------------------------
    def run(self, max_cycles: Optional[int] = None) -> int:
        """Run cycles until stopped (or ``max_cycles`` is reached). Returns the cycle count."""
        cycles = 0
        while not self._stop.is_set():
            try:
                self.run_cycle()
            except Exception:
                logger.exception("vital simulation cycle failed")
            finally:
                if self.cycle_cleanup is not None:
                    self.cycle_cleanup()
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break
            if self._stop.wait(self.interval):
                break
        logger.info("vital simulator stopped after %d cycles", cycles)
        return cycles

    def start(self) -> None:
        if self._thread is not None and self._thread.is_alive():
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self.run, name="vital-simulator", daemon=True)
        self._thread.start()
        logger.info("vital simulator started (interval %.1fs)", self.interval)

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
            self._thread = None


def build_simulator(interval: Optional[float] = None, *, release_connections: bool = True) -> VitalSimulator:
    """Simulator wired to the ORM repositories.

    With ``release_connections`` each cycle ends by dropping stale database
    connections, as a request would; leave it off inside a test transaction.
    """
    return VitalSimulator(
        OrmPatientRepository(),
        OrmDeviceRepository(),
        OrmVitalRepository(),
        interval=settings.VITAL_SIMULATOR_INTERVAL if interval is None else interval,
        cycle_cleanup=close_old_connections if release_connections else None,
    )


_background: Optional[VitalSimulator] = None


def start_background_simulator() -> Optional[VitalSimulator]:
    """Start the process-wide simulator unless disabled in settings."""
    global _background
    if not settings.VITAL_SIMULATOR_ENABLED:
        return None
    if _background is None:
        _background = build_simulator()
        atexit.register(_background.stop, 5)
    _background.start()
    return _background
