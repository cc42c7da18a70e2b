from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("portal", "0001_initial"),
    ]

    operations = [
        migrations.AlterField(
            model_name="member",
            name="total_trazos",
            field=models.PositiveBigIntegerField(default=0),
        ),
        migrations.AlterField(
            model_name="member",
            name="total_words",
            field=models.PositiveBigIntegerField(default=0),
        ),
    ]
