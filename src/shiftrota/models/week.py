"""Day-of-week constants and week calendar helpers."""
from datetime import date, timedelta
from typing import List, Union

# Sunday-first, matching the availability map keys (0 = Sunday)
DAYS = list(range(7))
DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]

# Day normalization map
DAY_ALIASES = {
    "sun": 0, "sunday": 0,
    "mon": 1, "monday": 1,
    "tue": 2, "tues": 2, "tuesday": 2,
    "wed": 3, "wednesday": 3,
    "thu": 4, "thur": 4, "thurs": 4, "thursday": 4,
    "fri": 5, "friday": 5,
    "sat": 6, "saturday": 6,
}


def normalize_day(value: Union[int, str]) -> int:
    """Normalize a day name, alias or index to a Sunday-based index (0-6)."""
    if isinstance(value, int) and not isinstance(value, bool):
        day = value
    else:
        key = str(value).strip().lower()
        if key.isdigit():
            day = int(key)
        elif key in DAY_ALIASES:
            day = DAY_ALIASES[key]
        else:
            raise ValueError(f"Unknown day: {value!r}")
    if day not in DAYS:
        raise ValueError(f"Day index out of range 0-6: {value!r}")
    return day


def week_start(any_day: date) -> date:
    """The Sunday on or before ``any_day``."""
    # date.weekday(): Monday=0 ... Sunday=6
    return any_day - timedelta(days=(any_day.weekday() + 1) % 7)


def week_dates(any_day: date) -> List[date]:
    """The seven dates (Sunday to Saturday) of the week containing ``any_day``."""
    start = week_start(any_day)
    return [start + timedelta(days=d) for d in DAYS]
