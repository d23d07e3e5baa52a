"""
Availability Index
==================
Who can work each (day, slot) cell, and how much of the week each person covers.
"""
from dataclasses import dataclass
from typing import Dict, List, Sequence

from shiftrota.models.person import Person
from shiftrota.models.slot import Cell, SlotCatalog
from shiftrota.utils.logging_setup import get_logger, log_function_call

logger = get_logger("shiftrota.engine.availability")


@dataclass(frozen=True)
class AvailabilityIndex:
    """Eligible names per cell (roster order) and weekly availability totals."""
    catalog: SlotCatalog
    eligible: Dict[Cell, List[str]]   # every cell of the week, possibly empty
    totals: Dict[str, int]            # name -> eligible cells across the week

    def eligible_for(self, cell: Cell) -> List[str]:
        return self.eligible.get(cell, [])

    def total(self, name: str) -> int:
        return self.totals.get(name, 0)

    def denominator(self, name: str) -> int:
        """Weekly availability floored at 1, safe to divide by."""
        return max(self.total(name), 1)

    @property
    def candidate_cells(self) -> List[Cell]:
        """Cells with at least one eligible person, in calendar order."""
        return [c for c, names in self.eligible.items() if names]

    @property
    def empty_cells(self) -> List[Cell]:
        return [c for c, names in self.eligible.items() if not names]


@log_function_call
def build_availability_index(
    roster: Sequence[Person],
    catalog: SlotCatalog,
) -> AvailabilityIndex:
    """
    Build the availability index for a roster.

    Only slots of the catalog count; availability entries naming other labels
    are ignored.

    Args:
        roster: Ordered people; the order is kept in every eligible list
        catalog: Validated slot catalog

    Returns:
        AvailabilityIndex over all ``7 x len(catalog)`` cells
    """
    eligible: Dict[Cell, List[str]] = {}
    totals: Dict[str, int] = {p.name: 0 for p in roster}

    for cell in catalog.cells():
        names = [p.name for p in roster if p.is_available(cell.day, cell.slot)]
        eligible[cell] = names
        for name in names:
            totals[name] += 1

    for p in roster:
        stray = {s for slots in p.availability.values() for s in slots if s not in catalog}
        if stray:
            logger.debug(f"{p.name}: ignoring slots not in catalog {sorted(stray)}")

    logger.debug(
        f"Availability index: {len(roster)} people, "
        f"{sum(1 for n in eligible.values() if n)}/{len(eligible)} cells staffable"
    )
    return AvailabilityIndex(catalog=catalog, eligible=eligible, totals=totals)
