"""StoreContext adapter reading the store from settings."""

from rewardledger.conf import reward_ledger_settings


class SettingsStoreContext:
    """
    Single-store deployments: the current store is a setting.

    Configuration in settings.py:
        REWARD_LEDGER = {
            "CURRENT_STORE_ID": 1,
        }
    """

    def current_store_id(self) -> int:
        return reward_ledger_settings.CURRENT_STORE_ID
