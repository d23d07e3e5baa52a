"""Person model for team members."""
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional

from .slot import SlotCatalog
from .week import DAYS, DAY_NAMES, normalize_day


@dataclass
class Person:
    """A team member and the slots they can work on each day of the week."""

    name: str
    # day-of-week (0 = Sunday) -> slot labels; a missing day means unavailable
    availability: Dict[int, FrozenSet[str]] = field(default_factory=dict)
    id: str = field(default="", compare=False)

    def __post_init__(self):
        """Validate and normalize fields."""
        self.name = str(self.name).strip()
        normalized: Dict[int, FrozenSet[str]] = {}
        for day, slots in (self.availability or {}).items():
            labels = frozenset(str(s).strip() for s in slots if str(s).strip())
            if labels:
                normalized[normalize_day(day)] = labels
        self.availability = normalized
        if not self.id:
            self.id = self.name

    def is_available(self, day: int, slot: str) -> bool:
        """True if ``slot`` is in this person's availability for ``day``."""
        return slot in self.availability.get(day, frozenset())

    @property
    def available_days(self) -> List[int]:
        return sorted(self.availability)

    def slots_on(self, day: int) -> FrozenSet[str]:
        return self.availability.get(day, frozenset())

    @classmethod
    def fully_available(
        cls,
        name: str,
        catalog: SlotCatalog,
        days: Optional[Iterable[int]] = None,
        id: str = "",
    ) -> "Person":
        """A person available for every slot of the catalog on the given days (default: all)."""
        labels = frozenset(catalog.labels)
        return cls(
            name=name,
            availability={d: labels for d in (DAYS if days is None else days)},
            id=id,
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "name": self.name,
            "availability": {
                DAY_NAMES[d]: sorted(self.availability[d]) for d in self.available_days
            },
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Person":
        """Create from dictionary. Day keys may be indices or day names."""
        return cls(
            name=d.get("name", ""),
            availability={
                normalize_day(day): frozenset(slots)
                for day, slots in (d.get("availability") or {}).items()
            },
            id=str(d.get("id", "") or ""),
        )
