from rest_framework import serializers


class LoginSerializer(serializers.Serializer):
    username = serializers.CharField(trim_whitespace=False)
    password = serializers.CharField(trim_whitespace=False)

    def to_internal_value(self, data):
        # Accept ``Username``/``Password`` as well as lowercase keys
        if hasattr(data, 'items'):
            data = {str(k).lower(): v for k, v in data.items()}
        return super().to_internal_value(data)
