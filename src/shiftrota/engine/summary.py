"""
Per-Person Summary
==================
Single source of truth for per-person totals, used by the CLI and by
callers rendering the week.
"""
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from shiftrota.models.assignment import Assignment
from shiftrota.models.person import Person
from shiftrota.models.slot import SlotCatalog
from shiftrota.utils.logging_setup import get_logger

from .availability import build_availability_index

logger = get_logger("shiftrota.engine.summary")


def shift_summary(assignment: Assignment, roster: Sequence[Person]) -> Dict[str, int]:
    """
    Count assigned cells per person.

    Roster order is kept and people never assigned get 0. Names found in the
    assignment but not in the roster (manual overrides) are appended.
    """
    summary: Dict[str, int] = {p.name: 0 for p in roster}
    for entry in assignment:
        for name in entry.members:
            summary[name] = summary.get(name, 0) + 1
    return summary


def load_spread(summary: Dict[str, int]) -> Optional[int]:
    """max - min over people with at least one assignment; None if nobody works."""
    counts = [c for c in summary.values() if c > 0]
    if not counts:
        return None
    return max(counts) - min(counts)


@dataclass
class PersonStats:
    """Statistics for a single person."""
    name: str
    assigned: int    # cells assigned this week
    available: int   # cells the person could work this week
    day_cells: int   # assigned day-period cells
    night_cells: int # assigned night-period cells

    @property
    def utilization(self) -> float:
        """Share of the person's availability actually assigned."""
        if self.available == 0:
            return 0.0
        return self.assigned / self.available


def calculate_person_stats(
    assignment: Assignment,
    roster: Sequence[Person],
    catalog: SlotCatalog,
) -> List[PersonStats]:
    """
    Per-person statistics, in roster order.

    Args:
        assignment: The computed (or manually edited) assignment
        roster: Ordered people
        catalog: Slot catalog the assignment was built on

    Returns:
        List of PersonStats, one per roster entry
    """
    index = build_availability_index(roster, catalog)
    totals = shift_summary(assignment, roster)

    day_cells: Dict[str, int] = {}
    night_cells: Dict[str, int] = {}
    for entry in assignment:
        bucket = day_cells if catalog.is_day(entry.slot) else night_cells
        for name in entry.members:
            bucket[name] = bucket.get(name, 0) + 1

    stats = [
        PersonStats(
            name=p.name,
            assigned=totals.get(p.name, 0),
            available=index.total(p.name),
            day_cells=day_cells.get(p.name, 0),
            night_cells=night_cells.get(p.name, 0),
        )
        for p in roster
    ]
    logger.debug(f"Calculated stats for {len(stats)} people")
    return stats


def stats_to_dict_list(stats: List[PersonStats]) -> List[Dict]:
    """Convert stats to list of dicts for DataFrame or JSON output."""
    return [
        {
            "name": s.name,
            "assigned": s.assigned,
            "day": s.day_cells,
            "night": s.night_cells,
            "available": s.available,
            "utilization": round(s.utilization, 3),
        }
        for s in stats
    ]
