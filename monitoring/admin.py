"""
Django admin registrations for the monitoring models.

Lets superusers inspect patients, devices and simulated vitals via the
``/admin/`` URL during development.
"""

from django.contrib import admin

from .models import MedicalDevice, Patient, Vital


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'full_name', 'age', 'gender', 'diagnosis', 'last_checkup')
    search_fields = ('full_name', 'diagnosis')


@admin.register(MedicalDevice)
class MedicalDeviceAdmin(admin.ModelAdmin):
    list_display = ('id', 'device_name', 'device_type')
    list_filter = ('device_type',)
    search_fields = ('device_name',)


@admin.register(Vital)
class VitalAdmin(admin.ModelAdmin):
    list_display = ('id', 'patient_id', 'medical_device', 'timestamp', 'heart_rate', 'temperature')
    list_filter = ('medical_device',)
    date_hierarchy = 'timestamp'
