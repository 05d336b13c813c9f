from rest_framework import serializers

from monitoring.models import MedicalDevice
from .clean import clean_text


class MedicalDeviceSerializer(serializers.ModelSerializer):
    deviceName = serializers.CharField(source='device_name', max_length=200)
    deviceType = serializers.CharField(source='device_type', max_length=100)

    class Meta:
        model = MedicalDevice
        fields = ['id', 'deviceName', 'deviceType']
        read_only_fields = ['id']

    def validate_deviceName(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('Device name is required.')
        return v

    def validate_deviceType(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('Device type is required.')
        return v
