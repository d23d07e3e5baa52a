"""Staffing settings for an assignment run."""
from dataclasses import dataclass, replace
from typing import Dict, Optional

from .errors import ConfigurationError
from .slot import Period

DEFAULT_MAX_ITERATIONS = 5


@dataclass(frozen=True)
class SchedulerSettings:
    """Caller-supplied staffing rules. Constant for the duration of a run."""

    day_headcount: int = 1     # people per day-period cell
    night_headcount: int = 1   # people per night-period cell
    weekly_cap: int = 10       # max assignments per person per week

    # Repair loop
    max_iterations: int = DEFAULT_MAX_ITERATIONS

    # None = deterministic roster-order tie-break; an int shuffles remaining ties reproducibly
    seed: Optional[int] = None

    def validate(self) -> None:
        """
        Refuse non-positive values.

        Raises:
            ConfigurationError: naming every offending field.
        """
        problems = [
            f"{name} must be >= 1 (got {getattr(self, name)!r})"
            for name in ("day_headcount", "night_headcount", "weekly_cap", "max_iterations")
            if not isinstance(getattr(self, name), int) or getattr(self, name) < 1
        ]
        if problems:
            raise ConfigurationError("; ".join(problems))

    def clamped(self) -> "SchedulerSettings":
        """Copy with every count raised to at least 1."""
        return replace(
            self,
            day_headcount=max(1, int(self.day_headcount)),
            night_headcount=max(1, int(self.night_headcount)),
            weekly_cap=max(1, int(self.weekly_cap)),
            max_iterations=max(1, int(self.max_iterations)),
        )

    def required_for(self, period: Period) -> int:
        """Headcount that applies to a cell of the given period."""
        return self.day_headcount if period == Period.DAY else self.night_headcount

    def to_dict(self) -> Dict:
        """Serialize to dictionary."""
        return {
            "day_headcount": self.day_headcount,
            "night_headcount": self.night_headcount,
            "weekly_cap": self.weekly_cap,
            "max_iterations": self.max_iterations,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, d: Dict) -> "SchedulerSettings":
        """Create from dictionary, ignoring unknown keys."""
        known = {k: v for k, v in d.items() if k in cls.__dataclass_fields__}
        return cls(**known)
