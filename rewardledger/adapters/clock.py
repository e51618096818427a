"""Default Clock adapter."""

from datetime import datetime

from django.utils import timezone


class DjangoClock:
    """Clock backed by django.utils.timezone.now (aware when USE_TZ=True)."""

    def now(self) -> datetime:
        return timezone.now()
