import django.db.models.deletion
import django.utils.timezone
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
        ('products', '0001_initial'),
    ]

    operations = [
        migrations.CreateModel(
            name='Order',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('roid', models.CharField(help_text='Public order number', max_length=50, unique=True)),
                ('create_time', models.DateTimeField(default=django.utils.timezone.now)),
                ('pay_time', models.DateTimeField(blank=True, null=True)),
                ('send_time', models.DateTimeField(blank=True, null=True)),
                ('complete_time', models.DateTimeField(blank=True, null=True)),
                ('amount', models.DecimalField(decimal_places=2, help_text='Total order amount', max_digits=10)),
                ('status', models.IntegerField(choices=[(-1, 'Pending Payment'), (1, 'Paid'), (2, 'Shipped'), (3, 'Completed'), (4, 'Refunded'), (5, 'Cancelled')], default=-1)),
                ('remark', models.TextField(blank=True, default='')),
                ('uid', models.ForeignKey(blank=True, db_column='uid', help_text='Purchaser', null=True, on_delete=django.db.models.deletion.SET_NULL, related_name='orders', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'db_table': 'orders',
                'ordering': ['-create_time'],
                'indexes': [
                    models.Index(fields=['uid'], name='orders_uid_idx'),
                    models.Index(fields=['status'], name='orders_status_idx'),
                    models.Index(fields=['create_time'], name='orders_create_time_idx'),
                ],
            },
        ),
        migrations.CreateModel(
            name='OrderItem',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('quantity', models.PositiveIntegerField()),
                ('price', models.DecimalField(decimal_places=2, help_text='Unit price', max_digits=10)),
                ('amount', models.DecimalField(decimal_places=2, help_text='Line total (quantity * price)', max_digits=10)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('order', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='items', to='orders.order')),
                ('product', models.ForeignKey(on_delete=django.db.models.deletion.PROTECT, related_name='order_items', to='products.product')),
            ],
            options={
                'db_table': 'order_items',
                'indexes': [
                    models.Index(fields=['order'], name='order_items_order_idx'),
                ],
            },
        ),
    ]
