# Generated migration for RewardPointsEntry

from decimal import Decimal

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="RewardPointsEntry",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "customer_id",
                    models.PositiveBigIntegerField(db_index=True, verbose_name="cliente"),
                ),
                (
                    "store_id",
                    models.PositiveIntegerField(
                        help_text="Loja onde os pontos foram gerados",
                        verbose_name="loja",
                    ),
                ),
                (
                    "used_with_order_id",
                    models.PositiveBigIntegerField(
                        blank=True,
                        help_text="Pedido no qual os pontos foram usados como pagamento",
                        null=True,
                        verbose_name="pedido",
                    ),
                ),
                (
                    "points",
                    models.IntegerField(
                        help_text="Positivo para acúmulo, negativo para resgate",
                        verbose_name="pontos",
                    ),
                ),
                (
                    "points_balance",
                    models.IntegerField(
                        blank=True,
                        help_text="Saldo após este lançamento (vazio = ainda não calculado)",
                        null=True,
                        verbose_name="saldo de pontos",
                    ),
                ),
                (
                    "used_amount",
                    models.DecimalField(
                        decimal_places=4,
                        default=Decimal("0"),
                        max_digits=18,
                        verbose_name="valor usado",
                    ),
                ),
                ("message", models.TextField(blank=True, verbose_name="mensagem")),
                (
                    "created_on_utc",
                    models.DateTimeField(
                        db_index=True,
                        help_text="Data efetiva; pode estar no futuro (acúmulo agendado)",
                        verbose_name="data de acúmulo",
                    ),
                ),
            ],
            options={
                "verbose_name": "lançamento de pontos",
                "verbose_name_plural": "histórico de pontos",
                "db_table": "rewardledger_entry",
                "ordering": ["-created_on_utc", "-id"],
                "indexes": [
                    models.Index(
                        fields=["customer_id", "store_id", "-created_on_utc"],
                        name="rewardledger_entry_scope_idx",
                    ),
                ],
            },
        ),
    ]
