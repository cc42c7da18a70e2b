import django.core.validators
import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Member",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("full_name", models.CharField(max_length=120)),
                ("age", models.PositiveSmallIntegerField()),
                (
                    "birthday",
                    models.CharField(
                        max_length=5,
                        validators=[
                            django.core.validators.RegexValidator(
                                "^(0[1-9]|[12]\\d|3[01])/(0[1-9]|1[0-2])$", "Birthday must use dd/mm format."
                            )
                        ],
                    ),
                ),
                ("face_claim", models.CharField(max_length=120)),
                (
                    "signature",
                    models.CharField(
                        max_length=64,
                        unique=True,
                        validators=[
                            django.core.validators.RegexValidator(
                                "^#\\S+$", "Signature must start with # and contain no spaces."
                            )
                        ],
                    ),
                ),
                ("facebook_link", models.URLField(max_length=255)),
                ("motivation", models.TextField()),
                (
                    "role",
                    models.CharField(
                        choices=[("user", "Usuario"), ("admin", "Administrador")], default="user", max_length=8
                    ),
                ),
                (
                    "rank",
                    models.CharField(
                        choices=[
                            ("alma_en_transito", "Alma en tránsito"),
                            ("voz_en_boceto", "Voz en boceto"),
                            ("narrador_de_atmosferas", "Narrador de atmósferas"),
                            ("escritor_de_introspecciones", "Escritor de introspecciones"),
                            ("arquitecto_del_alma", "Arquitecto del alma"),
                        ],
                        default="alma_en_transito",
                        max_length=32,
                    ),
                ),
                ("total_trazos", models.PositiveIntegerField(default=0)),
                ("total_words", models.PositiveIntegerField(default=0)),
                ("total_activities", models.PositiveIntegerField(default=0)),
                ("registration_date", models.DateTimeField(auto_now_add=True)),
            ],
            options={
                "indexes": [
                    models.Index(fields=["-total_trazos", "id"], name="idx_member_trazos"),
                    models.Index(fields=["-total_words", "id"], name="idx_member_words"),
                ],
            },
        ),
        migrations.CreateModel(
            name="Activity",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("name", models.CharField(max_length=200)),
                ("date", models.DateField()),
                ("words", models.PositiveIntegerField()),
                (
                    "type",
                    models.CharField(
                        choices=[
                            ("narrativa", "Narrativa"),
                            ("microcuento", "Microcuento"),
                            ("drabble", "Drabble"),
                            ("hilo", "Hilo"),
                            ("rol", "Rol"),
                            ("encuesta", "Encuesta"),
                            ("collage", "Collage"),
                            ("poemas", "Poemas"),
                            ("pinturas", "Pinturas"),
                            ("interpretacion", "Interpretación"),
                            ("otro", "Otro"),
                        ],
                        max_length=16,
                    ),
                ),
                ("responses", models.PositiveIntegerField(default=0)),
                ("link", models.URLField(blank=True, default="", max_length=500)),
                ("description", models.TextField(blank=True, default="")),
                (
                    "arista",
                    models.CharField(
                        choices=[
                            ("inventario_de_la_vida", "Inventario de la vida"),
                            ("mapa_del_inconsciente", "Mapa del inconsciente"),
                            ("ecos_del_corazon", "Ecos del corazón"),
                            ("reflejos_en_el_tiempo", "Reflejos en el tiempo"),
                            ("galeria_del_alma", "Galería del alma"),
                        ],
                        max_length=32,
                    ),
                ),
                ("album", models.CharField(max_length=120)),
                ("trazos", models.PositiveIntegerField(editable=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "member",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, related_name="activities", to="portal.member"
                    ),
                ),
            ],
            options={
                "indexes": [
                    models.Index(fields=["member", "-created_at"], name="idx_activity_member_created"),
                ],
            },
        ),
        migrations.CreateModel(
            name="News",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("content", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                (
                    "author",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, related_name="news", to="portal.member"
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "news",
            },
        ),
        migrations.CreateModel(
            name="Announcement",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("content", models.TextField()),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                (
                    "author",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE, related_name="announcements", to="portal.member"
                    ),
                ),
            ],
        ),
        migrations.CreateModel(
            name="ActivityToDo",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("title", models.CharField(max_length=200)),
                ("description", models.TextField()),
                (
                    "arista",
                    models.CharField(
                        choices=[
                            ("inventario_de_la_vida", "Inventario de la vida"),
                            ("mapa_del_inconsciente", "Mapa del inconsciente"),
                            ("ecos_del_corazon", "Ecos del corazón"),
                            ("reflejos_en_el_tiempo", "Reflejos en el tiempo"),
                            ("galeria_del_alma", "Galería del alma"),
                        ],
                        max_length=32,
                    ),
                ),
                ("album", models.CharField(max_length=120)),
                ("due_date", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True, db_index=True)),
                (
                    "author",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="activities_to_do",
                        to="portal.member",
                    ),
                ),
            ],
            options={
                "verbose_name_plural": "activities to do",
            },
        ),
    ]
