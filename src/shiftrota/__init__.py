"""Weekly shift assignment under availability and fairness constraints."""
from shiftrota.engine import generate_assignment, shift_summary
from shiftrota.models import (
    FOUR_HOUR_CATALOG,
    SIX_HOUR_CATALOG,
    Assignment,
    ConfigurationError,
    Person,
    SchedulerSettings,
    SlotCatalog,
)

__version__ = "0.1.0"

__all__ = [
    "generate_assignment",
    "shift_summary",
    "Person",
    "SlotCatalog",
    "SIX_HOUR_CATALOG",
    "FOUR_HOUR_CATALOG",
    "SchedulerSettings",
    "Assignment",
    "ConfigurationError",
]
