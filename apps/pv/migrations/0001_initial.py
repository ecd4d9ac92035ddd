import django.db.models.deletion
import django.utils.timezone
from decimal import Decimal
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('orders', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='PVLedger',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('monthly_pv', models.DecimalField(decimal_places=3, default=Decimal('0'), max_digits=14)),
                ('last_pv_order', models.DateTimeField(blank=True, null=True)),
                ('reset_period', models.CharField(blank=True, default='', help_text='Last month closed, YYYY-MM', max_length=7)),
                ('version', models.PositiveIntegerField(default=0)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='pv_ledger', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'PV Ledger',
                'verbose_name_plural': 'PV Ledgers',
                'db_table': 'pv_ledgers',
                'constraints': [
                    models.CheckConstraint(condition=models.Q(monthly_pv__gte=0), name='pv_ledger_monthly_pv_non_negative'),
                ],
            },
        ),
        migrations.CreateModel(
            name='PVAccrual',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('pv', models.DecimalField(decimal_places=3, max_digits=14)),
                ('created_at', models.DateTimeField(db_index=True, default=django.utils.timezone.now)),
                ('order', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='pv_accrual', to='orders.order')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='pv_accruals', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'PV Accrual',
                'verbose_name_plural': 'PV Accruals',
                'db_table': 'pv_accruals',
                'ordering': ['-created_at'],
            },
        ),
        migrations.CreateModel(
            name='PVResetRun',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('period', models.CharField(help_text='Month being closed, YYYY-MM', max_length=7, unique=True)),
                ('status', models.CharField(choices=[('running', 'Running'), ('completed', 'Completed'), ('partial', 'Partially completed')], default='running', max_length=20)),
                ('cutoff', models.DateTimeField(help_text='Accruals after this instant belong to the next cycle')),
                ('last_user_id', models.BigIntegerField(default=0)),
                ('users_reset', models.PositiveIntegerField(default=0)),
                ('failed_user_ids', models.JSONField(blank=True, default=list)),
                ('started_at', models.DateTimeField(default=django.utils.timezone.now)),
                ('finished_at', models.DateTimeField(blank=True, null=True)),
            ],
            options={
                'verbose_name': 'PV Reset Run',
                'verbose_name_plural': 'PV Reset Runs',
                'db_table': 'pv_reset_runs',
                'ordering': ['-period'],
            },
        ),
    ]
