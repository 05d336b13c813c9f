import django.db.models.deletion
import django.utils.timezone
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='MedicalDevice',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('device_name', models.CharField(max_length=200)),
                ('device_type', models.CharField(max_length=100)),
            ],
            options={
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Patient',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('full_name', models.CharField(max_length=200)),
                ('age', models.PositiveIntegerField(default=0)),
                ('gender', models.CharField(blank=True, default='', max_length=20)),
                ('diagnosis', models.CharField(blank=True, default='', max_length=255)),
                ('last_checkup', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'ordering': ['id'],
            },
        ),
        migrations.CreateModel(
            name='Vital',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('timestamp', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('heart_rate', models.FloatField(default=0)),
                ('blood_pressure_systolic', models.FloatField(default=0)),
                ('blood_pressure_diastolic', models.FloatField(default=0)),
                ('oxygen_saturation', models.FloatField(default=0)),
                ('temperature', models.FloatField(default=0)),
                ('medical_device', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='vitals', to='monitoring.medicaldevice')),
                ('patient', models.ForeignKey(db_constraint=False, on_delete=django.db.models.deletion.DO_NOTHING, related_name='vitals', to='monitoring.patient')),
            ],
            options={
                'ordering': ['id'],
            },
        ),
    ]
