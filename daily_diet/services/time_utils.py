import time
from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def now_epoch_ms() -> int:
    return time.time_ns() // 1_000_000


def to_epoch_ms(value: datetime) -> int:
    # Дата без таймзоны считается UTC
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // timedelta(milliseconds=1)
