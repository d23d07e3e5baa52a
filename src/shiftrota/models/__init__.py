# shiftrota/models - Data models for the scheduling engine
from .assignment import Assignment, CellAssignment
from .errors import ConfigurationError
from .person import Person
from .settings import SchedulerSettings
from .slot import (
    FOUR_HOUR_CATALOG,
    SIX_HOUR_CATALOG,
    Cell,
    Period,
    Slot,
    SlotCatalog,
    get_catalog,
)
from .week import DAY_NAMES, DAYS, normalize_day, week_dates, week_start

__all__ = [
    "Person",
    "Slot", "SlotCatalog", "Period", "Cell",
    "SIX_HOUR_CATALOG", "FOUR_HOUR_CATALOG", "get_catalog",
    "SchedulerSettings",
    "Assignment", "CellAssignment",
    "ConfigurationError",
    "DAYS", "DAY_NAMES", "normalize_day", "week_start", "week_dates",
]
