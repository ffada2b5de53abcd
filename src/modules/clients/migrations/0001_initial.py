from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Client",
            fields=[
                ("id", models.BigAutoField(primary_key=True, serialize=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("version", models.PositiveIntegerField(default=1, editable=False)),
                ("name", models.CharField(max_length=150)),
                ("tax_document", models.CharField(max_length=14, unique=True)),
                ("email", models.EmailField(max_length=150, unique=True)),
                (
                    "person_type",
                    models.CharField(
                        choices=[
                            ("individual", "Pessoa Física"),
                            ("company", "Pessoa Jurídica"),
                        ],
                        max_length=10,
                    ),
                ),
                ("phone", models.CharField(max_length=11)),
                (
                    "state_registration",
                    models.CharField(
                        blank=True, default=None, max_length=12, null=True
                    ),
                ),
                ("state_registration_exempt", models.BooleanField(default=False)),
                (
                    "gender",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("male", "Masculino"),
                            ("female", "Feminino"),
                            ("other", "Outro"),
                        ],
                        default=None,
                        max_length=6,
                        null=True,
                    ),
                ),
                ("birth_date", models.DateField(blank=True, default=None, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Ativo"), ("blocked", "Bloqueado")],
                        default="active",
                        max_length=7,
                    ),
                ),
                ("password_hash", models.CharField(max_length=128)),
            ],
            options={
                "db_table": "clients",
                "ordering": ["id"],
                "indexes": [
                    models.Index(fields=["name"], name="clients_name_idx"),
                ],
                "constraints": [
                    models.UniqueConstraint(
                        condition=models.Q(
                            ("state_registration_exempt", False),
                            ("state_registration__isnull", False),
                        ),
                        fields=("state_registration",),
                        name="clients_state_registration_uniq",
                    ),
                ],
            },
        ),
    ]
