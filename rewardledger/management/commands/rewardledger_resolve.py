"""Management command to materialize balances of entries that became effective."""

from django.core.management.base import BaseCommand

from rewardledger.service import RewardPointService
from rewardledger.services import history


class Command(BaseCommand):
    help = "Compute pending reward points balances of entries whose accrual date has passed"

    def add_arguments(self, parser):
        parser.add_argument(
            "--customer",
            type=int,
            default=0,
            help="Only this customer id",
        )
        parser.add_argument(
            "--store",
            type=int,
            default=0,
            help="Only this store id",
        )

    def handle(self, *args, **options):
        service = RewardPointService()
        now = service.clock.now()

        scopes = set(
            history.pending_scopes(
                now,
                customer_id=options["customer"],
                store_id=options["store"],
            )
        )
        if service.points_accumulated_for_all_stores:
            scopes = {(customer_id, 0) for customer_id, _ in scopes}

        for customer_id, store_id in sorted(scopes):
            service.get_balance(customer_id, store_id)

        self.stdout.write(
            self.style.SUCCESS(f"Resolved balances for {len(scopes)} scope(s).")
        )
