from decimal import Decimal

import django.core.validators
import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Room',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('owner_name', models.CharField(blank=True, max_length=150)),
                ('owner_phone', models.CharField(blank=True, max_length=30)),
                ('owner_email', models.EmailField(blank=True, max_length=254)),
                ('location', models.CharField(choices=[('Belihuloya Town', 'Belihuloya Town'), ('Near University', 'Near University'), ('Belihuloya Center', 'Belihuloya Center'), ('Balangoda Road', 'Balangoda Road'), ('Kalupahana', 'Kalupahana')], max_length=100)),
                ('address', models.CharField(blank=True, max_length=255)),
                ('description', models.TextField(blank=True)),
                ('images', models.JSONField(blank=True, default=list, help_text='Image URLs, first one is the cover.')),
                ('is_available', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('name', models.CharField(max_length=255)),
                ('room_type', models.CharField(choices=[('single', 'Single'), ('double', 'Double'), ('apartment', 'Apartment'), ('hostel', 'Hostel')], max_length=20)),
                ('price_per_month', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('amenities', models.JSONField(blank=True, default=list)),
                ('available_from', models.DateField(default=django.utils.timezone.localdate)),
                ('latitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('longitude', models.DecimalField(blank=True, decimal_places=6, max_digits=9, null=True)),
                ('owner', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='rooms', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Room',
                'verbose_name_plural': 'Rooms',
                'ordering': ['-created_at', '-id'],
                'abstract': False,
                'indexes': [models.Index(fields=['is_available', 'room_type'], name='listings_ro_is_avai_6b1f0e_idx')],
                'constraints': [models.CheckConstraint(condition=models.Q(('price_per_month__gte', 0)), name='room_price_non_negative')],
            },
        ),
        migrations.CreateModel(
            name='Vehicle',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('owner_name', models.CharField(blank=True, max_length=150)),
                ('owner_phone', models.CharField(blank=True, max_length=30)),
                ('owner_email', models.EmailField(blank=True, max_length=254)),
                ('location', models.CharField(choices=[('Belihuloya Town', 'Belihuloya Town'), ('Near University', 'Near University'), ('Belihuloya Center', 'Belihuloya Center'), ('Balangoda Road', 'Balangoda Road'), ('Kalupahana', 'Kalupahana')], max_length=100)),
                ('address', models.CharField(blank=True, max_length=255)),
                ('description', models.TextField(blank=True)),
                ('images', models.JSONField(blank=True, default=list, help_text='Image URLs, first one is the cover.')),
                ('is_available', models.BooleanField(default=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('brand', models.CharField(max_length=100)),
                ('model', models.CharField(max_length=100)),
                ('vehicle_type', models.CharField(choices=[('car', 'Car'), ('bike', 'Bike'), ('van', 'Van')], max_length=20)),
                ('rental_price_per_day', models.DecimalField(decimal_places=2, max_digits=12, validators=[django.core.validators.MinValueValidator(Decimal('0'))])),
                ('specifications', models.JSONField(blank=True, default=dict, help_text='year, transmission, fuel, seats, ac, engine')),
                ('owner', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='vehicles', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Vehicle',
                'verbose_name_plural': 'Vehicles',
                'ordering': ['-created_at', '-id'],
                'abstract': False,
                'indexes': [models.Index(fields=['is_available', 'vehicle_type'], name='listings_ve_is_avai_3c9d2a_idx')],
                'constraints': [models.CheckConstraint(condition=models.Q(('rental_price_per_day__gte', 0)), name='vehicle_price_non_negative')],
            },
        ),
    ]
