from decimal import Decimal

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):
    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='Booking',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('booking_type', models.CharField(choices=[('room', 'Room'), ('vehicle', 'Vehicle')], max_length=20)),
                ('item_id', models.PositiveBigIntegerField()),
                ('item_name', models.CharField(max_length=255)),
                ('item_images', models.JSONField(blank=True, default=list)),
                ('start_date', models.DateField()),
                ('end_date', models.DateField()),
                ('unit_price', models.DecimalField(decimal_places=2, max_digits=12)),
                ('duration', models.PositiveIntegerField(help_text='Months for rooms, days for vehicles.')),
                ('total_amount', models.DecimalField(decimal_places=2, default=Decimal('0.00'), max_digits=14)),
                ('currency', models.CharField(default='LKR', max_length=3)),
                ('payment_method', models.CharField(choices=[('card', 'Card'), ('cash', 'Cash')], max_length=10)),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('confirmed', 'Confirmed'), ('completed', 'Completed'), ('cancelled', 'Cancelled')], default='pending', max_length=20)),
                ('cancelled_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('owner', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='received_bookings', to=settings.AUTH_USER_MODEL)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='bookings', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'Booking',
                'verbose_name_plural': 'Bookings',
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['user', 'status'], name='bookings_bo_user_id_5f2c1e_idx'),
                    models.Index(fields=['booking_type', 'item_id'], name='bookings_bo_booking_8a7d44_idx'),
                ],
                'constraints': [
                    models.CheckConstraint(condition=models.Q(('end_date__gte', models.F('start_date'))), name='booking_valid_dates'),
                    models.CheckConstraint(condition=models.Q(('total_amount__gte', 0)), name='booking_total_non_negative'),
                ],
            },
        ),
    ]
