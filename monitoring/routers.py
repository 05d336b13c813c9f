"""
URL mappings for the monitoring API.

Trailing slashes are deliberately omitted.  Path parameters are integer
ids; a non-numeric id never reaches a view.
"""
from django.urls import path, include

from .auth_views import login_view, secure_vitals_view
from .views import health
from .views.devices import devices, device_detail, device_vitals
from .views.patients import patients, patient_detail
from .views.vitals import vitals, vital_detail, patient_vitals


urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz, name='healthz'),
    # Authentication
    path('api/auth/login', login_view, name='login_view'),
    path('api/auth/secure-vitals', secure_vitals_view, name='secure_vitals_view'),
    # Patients
    path('api/patients', patients, name='patients'),
    path('api/patients/<int:pk>', patient_detail, name='patient_detail'),
    # Medical devices
    path('api/medicaldevices', devices, name='devices'),
    path('api/medicaldevices/<int:pk>', device_detail, name='device_detail'),
    path('api/medicaldevices/<int:pk>/vitals', device_vitals, name='device_vitals'),
    # Vitals
    path('api/vitals', vitals, name='vitals'),
    path('api/vitals/<int:pk>', vital_detail, name='vital_detail'),
    path('api/vitals/patient/<int:patient_id>', patient_vitals, name='patient_vitals'),
]
