"""System clock (IClock) backed by utc_now()."""

from datetime import datetime

from app.shared.utils.datetime import utc_now


class SystemClock:
    def now(self) -> datetime:
        return utc_now()
