from rest_framework import serializers

from monitoring.models import MedicalDevice, Patient, Vital


class VitalSerializer(serializers.ModelSerializer):
    patientId = serializers.PrimaryKeyRelatedField(source='patient', queryset=Patient.objects.all())
    medicalDeviceId = serializers.PrimaryKeyRelatedField(source='medical_device', queryset=MedicalDevice.objects.all())
    timestamp = serializers.DateTimeField(required=False)
    heartRate = serializers.FloatField(source='heart_rate', required=False, default=0)
    bloodPressureSystolic = serializers.FloatField(source='blood_pressure_systolic', required=False, default=0)
    bloodPressureDiastolic = serializers.FloatField(source='blood_pressure_diastolic', required=False, default=0)
    oxygenSaturation = serializers.FloatField(source='oxygen_saturation', required=False, default=0)
    temperature = serializers.FloatField(required=False, default=0)

    class Meta:
        model = Vital
        fields = [
            'id', 'patientId', 'medicalDeviceId', 'timestamp', 'heartRate',
            'bloodPressureSystolic', 'bloodPressureDiastolic', 'oxygenSaturation', 'temperature',
        ]
        read_only_fields = ['id']
