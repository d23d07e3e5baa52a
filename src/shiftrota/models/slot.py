"""
Slot Catalog
============
The fixed, ordered set of time-of-day intervals staffed every day of the week.

A catalog must cover a full 24h cycle with no gaps and no overlaps. Intervals
may wrap past midnight (``22:00-02:00``). Each slot is statically classified as
a day-period or night-period slot, which picks the headcount that applies.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Iterator, List, NamedTuple, Tuple

from .errors import ConfigurationError
from .week import DAYS

MINUTES_PER_DAY = 24 * 60


class Period(str, Enum):
    """Which headcount setting a slot uses."""
    DAY = "day"
    NIGHT = "night"


class Cell(NamedTuple):
    """One unit of weekly coverage: (day-of-week, slot label)."""
    day: int
    slot: str


def parse_clock(text: str) -> int:
    """Parse ``HH:MM`` into minutes after midnight (``24:00`` allowed)."""
    try:
        hours, minutes = text.strip().split(":")
        h, m = int(hours), int(minutes)
    except ValueError:
        raise ConfigurationError(f"Invalid time {text!r}, expected HH:MM") from None
    if not (0 <= h <= 24 and 0 <= m < 60) or (h == 24 and m != 0):
        raise ConfigurationError(f"Invalid time {text!r}")
    return h * 60 + m


@dataclass(frozen=True)
class Slot:
    """A time-of-day interval, e.g. ``06:00-10:00``."""
    label: str
    start: int  # minutes after midnight
    end: int    # minutes after midnight, may be < start when wrapping
    period: Period = Period.DAY

    @property
    def duration(self) -> int:
        """Length in minutes, accounting for midnight wrap. Equal ends mean a full day."""
        return (self.end - self.start) % MINUTES_PER_DAY or MINUTES_PER_DAY

    @property
    def is_day(self) -> bool:
        return self.period == Period.DAY

    @classmethod
    def from_label(cls, label: str, period: Period = Period.DAY) -> "Slot":
        """Build a slot from an ``HH:MM-HH:MM`` label."""
        try:
            start_txt, end_txt = label.split("-")
        except ValueError:
            raise ConfigurationError(f"Invalid slot label {label!r}, expected HH:MM-HH:MM") from None
        return cls(
            label=label,
            start=parse_clock(start_txt) % MINUTES_PER_DAY,
            end=parse_clock(end_txt) % MINUTES_PER_DAY,
            period=Period(period),
        )


@dataclass(frozen=True)
class SlotCatalog:
    """Ordered, validated slot catalog. Position in the catalog is the slot order."""
    slots: Tuple[Slot, ...]
    name: str = "custom"
    _positions: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "slots", tuple(self.slots))
        self._validate()
        object.__setattr__(
            self, "_positions", {s.label: i for i, s in enumerate(self.slots)}
        )

    def _validate(self):
        if not self.slots:
            raise ConfigurationError("Slot catalog is empty")

        labels = [s.label for s in self.slots]
        duplicates = sorted({l for l in labels if labels.count(l) > 1})
        if duplicates:
            raise ConfigurationError(f"Duplicate slot labels: {duplicates}")

        for s in self.slots:
            if not isinstance(s.period, Period):
                raise ConfigurationError(f"Slot {s.label} has no day/night classification")

        # Each slot must start where the previous one ends, cyclically
        for prev, nxt in zip(self.slots, self.slots[1:] + self.slots[:1]):
            if prev.end != nxt.start:
                raise ConfigurationError(
                    f"Slot catalog has a gap or overlap between {prev.label} and {nxt.label}"
                )

        total = sum(s.duration for s in self.slots)
        if total != MINUTES_PER_DAY:
            raise ConfigurationError(
                f"Slot catalog covers {total} minutes, expected {MINUTES_PER_DAY} (overlap)"
            )

    @classmethod
    def from_labels(
        cls,
        labels: Iterable[str],
        day_labels: Iterable[str],
        name: str = "custom",
    ) -> "SlotCatalog":
        """
        Build a catalog from ordered labels and the subset that is day-period.

        Raises:
            ConfigurationError: a day-period label is not part of the catalog,
                or the intervals do not tile the day.
        """
        labels = list(labels)
        day_set = set(day_labels)
        unknown = sorted(day_set - set(labels))
        if unknown:
            raise ConfigurationError(f"Day-period labels not in catalog: {unknown}")
        return cls(
            slots=tuple(
                Slot.from_label(l, Period.DAY if l in day_set else Period.NIGHT)
                for l in labels
            ),
            name=name,
        )

    def __iter__(self) -> Iterator[Slot]:
        return iter(self.slots)

    def __len__(self) -> int:
        return len(self.slots)

    def __contains__(self, label: object) -> bool:
        return label in self._positions

    @property
    def labels(self) -> List[str]:
        return [s.label for s in self.slots]

    def position(self, label: str) -> int:
        """Index of a slot within the catalog."""
        return self._positions[label]

    def get(self, label: str) -> Slot:
        return self.slots[self._positions[label]]

    def is_day(self, label: str) -> bool:
        """Day/night classifier: True for day-period slots."""
        return self.get(label).is_day

    def period_of(self, label: str) -> Period:
        return self.get(label).period

    def cells(self) -> List[Cell]:
        """All ``7 x len(catalog)`` cells of the week in calendar order."""
        return [Cell(d, s.label) for d in DAYS for s in self.slots]


SIX_HOUR_CATALOG = SlotCatalog.from_labels(
    ["06:00-12:00", "12:00-18:00", "18:00-00:00", "00:00-06:00"],
    day_labels=["06:00-12:00", "12:00-18:00"],
    name="six-hour",
)

FOUR_HOUR_CATALOG = SlotCatalog.from_labels(
    ["06:00-10:00", "10:00-14:00", "14:00-18:00", "18:00-22:00", "22:00-02:00", "02:00-06:00"],
    day_labels=["06:00-10:00", "10:00-14:00", "14:00-18:00", "18:00-22:00"],
    name="four-hour",
)

CATALOGS = {
    SIX_HOUR_CATALOG.name: SIX_HOUR_CATALOG,
    FOUR_HOUR_CATALOG.name: FOUR_HOUR_CATALOG,
}


def get_catalog(name: str) -> SlotCatalog:
    """Look up a built-in catalog by name."""
    key = str(name).strip().lower()
    if key not in CATALOGS:
        raise ConfigurationError(
            f"Unknown slot catalog {name!r}, expected one of {sorted(CATALOGS)}"
        )
    return CATALOGS[key]
