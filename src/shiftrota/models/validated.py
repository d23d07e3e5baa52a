"""
Pydantic Validated Models
=========================
Strict validation layer for settings coming from outside the process
(CLI flags, JSON payloads).

Usage:
    from shiftrota.models.validated import ValidatedSettings

    settings = ValidatedSettings(day_headcount=2, weekly_cap=8).to_dataclass()

The engine itself works on the ``SchedulerSettings`` dataclass.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .settings import DEFAULT_MAX_ITERATIONS, SchedulerSettings
from .slot import CATALOGS


class ValidatedSettings(BaseModel):
    """
    Pydantic-validated scheduler settings.

    Use this for strict validation at input boundaries.
    Can be converted to/from the dataclass SchedulerSettings.
    """
    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    day_headcount: int = Field(default=1, ge=1, le=100, description="People per day-period slot")
    night_headcount: int = Field(default=1, ge=1, le=100, description="People per night-period slot")
    weekly_cap: int = Field(default=10, ge=1, le=168, description="Max slots per person per week")
    max_iterations: int = Field(default=DEFAULT_MAX_ITERATIONS, ge=1, le=20)
    seed: Optional[int] = Field(default=None, description="Seed for shuffling remaining ties")
    catalog: str = Field(default="six-hour", description="Built-in slot catalog name")

    @model_validator(mode="after")
    def validate_catalog(self):
        """Catalog must be one of the built-in ones."""
        if self.catalog not in CATALOGS:
            raise ValueError(f"catalog must be one of {sorted(CATALOGS)}")
        return self

    def to_dataclass(self) -> SchedulerSettings:
        """Convert to the dataclass used by the engine."""
        return SchedulerSettings(
            day_headcount=self.day_headcount,
            night_headcount=self.night_headcount,
            weekly_cap=self.weekly_cap,
            max_iterations=self.max_iterations,
            seed=self.seed,
        )

    @classmethod
    def from_dataclass(cls, settings: SchedulerSettings, catalog: str = "six-hour") -> "ValidatedSettings":
        """Create from dataclass SchedulerSettings."""
        return cls(catalog=catalog, **settings.to_dict())
