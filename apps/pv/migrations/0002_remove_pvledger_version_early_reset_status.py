from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ('pv', '0001_initial'),
    ]

    operations = [
        migrations.RemoveField(
            model_name='pvledger',
            name='version',
        ),
        migrations.AlterField(
            model_name='pvresetrun',
            name='status',
            field=models.CharField(choices=[('running', 'Running'), ('completed', 'Completed'), ('partial', 'Partially completed'), ('early', 'Reset early, period still open')], default='running', max_length=20),
        ),
    ]
