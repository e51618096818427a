from django.apps import AppConfig


class RewardLedgerConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "rewardledger"
    verbose_name = "Reward Ledger - Pontos de Fidelidade"
