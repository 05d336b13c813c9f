from rest_framework import serializers

from monitoring.models import Patient
from .clean import clean_text


class PatientSerializer(serializers.ModelSerializer):
    fullName = serializers.CharField(source='full_name', max_length=200)
    gender = serializers.CharField(max_length=20, required=False, allow_blank=True, default='')
    diagnosis = serializers.CharField(max_length=255, required=False, allow_blank=True, default='')
    lastCheckup = serializers.DateTimeField(source='last_checkup', required=False, allow_null=True)

    class Meta:
        model = Patient
        fields = ['id', 'fullName', 'age', 'gender', 'diagnosis', 'lastCheckup']
        read_only_fields = ['id']
        extra_kwargs = {'age': {'min_value': 0, 'max_value': 150}}

    def validate_fullName(self, v):
        v = clean_text(v)
        if not v:
            raise serializers.ValidationError('Full name is required.')
        return v

    def validate_gender(self, v):
        return clean_text(v)

    def validate_diagnosis(self, v):
        return clean_text(v)
