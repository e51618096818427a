"""RewardPointsEntry model: one signed delta in a customer's points history."""

from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _


class RewardPointsEntry(models.Model):
    """
    Reward points history entry.

    Entries are append-only. ``points_balance`` is the running balance of the
    entry's scope as of this entry; ``None`` means "not computed yet", which is
    distinct from a computed balance of 0. Scheduled accruals carry a future
    ``created_on_utc`` and get their balance only after that date has passed
    and the history is read.

    Customers and orders are opaque references: only their identifiers are
    stored, there is no lifecycle coupling.
    """

    # References (identifiers only)
    customer_id = models.PositiveBigIntegerField(
        _("cliente"),
        db_index=True,
    )
    store_id = models.PositiveIntegerField(
        _("loja"),
        help_text=_("Loja onde os pontos foram gerados"),
    )
    used_with_order_id = models.PositiveBigIntegerField(
        _("pedido"),
        null=True,
        blank=True,
        help_text=_("Pedido no qual os pontos foram usados como pagamento"),
    )

    # Points
    points = models.IntegerField(
        _("pontos"),
        help_text=_("Positivo para acúmulo, negativo para resgate"),
    )
    points_balance = models.IntegerField(
        _("saldo de pontos"),
        null=True,
        blank=True,
        help_text=_("Saldo após este lançamento (vazio = ainda não calculado)"),
    )
    used_amount = models.DecimalField(
        _("valor usado"),
        max_digits=18,
        decimal_places=4,
        default=Decimal("0"),
    )

    message = models.TextField(_("mensagem"), blank=True)

    created_on_utc = models.DateTimeField(
        _("data de acúmulo"),
        db_index=True,
        help_text=_("Data efetiva; pode estar no futuro (acúmulo agendado)"),
    )

    class Meta:
        db_table = "rewardledger_entry"
        verbose_name = _("lançamento de pontos")
        verbose_name_plural = _("histórico de pontos")
        ordering = ["-created_on_utc", "-id"]
        indexes = [
            models.Index(
                fields=["customer_id", "store_id", "-created_on_utc"],
                name="rewardledger_entry_scope_idx",
            ),
        ]

    def __str__(self):
        sign = "+" if self.points > 0 else ""
        return f"{sign}{self.points}pts — {self.message}"

    @property
    def has_balance(self) -> bool:
        return self.points_balance is not None

    @property
    def is_redemption(self) -> bool:
        return self.points < 0

    def is_effective(self, now) -> bool:
        """True once ``created_on_utc`` is strictly before ``now``."""
        return self.created_on_utc < now
