"""
Manual Overrides
================
Rewrite a single cell of a computed assignment by hand, and list what
changed between two assignments. The engine is not involved: an override
is a direct edit of the Assignment value.
"""
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Sequence

from shiftrota.models.assignment import Assignment, CellAssignment
from shiftrota.models.errors import ConfigurationError
from shiftrota.models.person import Person
from shiftrota.models.settings import SchedulerSettings
from shiftrota.models.slot import Cell, SlotCatalog
from shiftrota.models.week import DAYS
from shiftrota.utils.logging_setup import get_logger

logger = get_logger("shiftrota.engine.overrides")


def parse_member_list(text: str) -> List[str]:
    """Split ``"Ann, Bob ,, Cy"`` into ``["Ann", "Bob", "Cy"]``."""
    return [part.strip() for part in text.split(",") if part.strip()]


def apply_override(
    assignment: Assignment,
    day: int,
    slot: str,
    names: Iterable[str],
    roster: Sequence[Person],
    catalog: SlotCatalog,
    settings: SchedulerSettings,
) -> Assignment:
    """
    Return a copy of ``assignment`` with one cell's members replaced.

    Names not on the roster are dropped. A cell with no entry yet (nobody was
    eligible) gets one. Availability and the weekly cap are not enforced; run
    ``validate_assignment`` to see what the edit broke.

    Raises:
        ConfigurationError: day or slot outside the catalog
    """
    if day not in DAYS or slot not in catalog:
        raise ConfigurationError(f"No such cell: day {day} {slot}")

    names = list(names)
    known = {p.name for p in roster}
    members = [n for n in dict.fromkeys(names) if n in known]
    dropped = [n for n in names if n not in known]
    if dropped:
        logger.info(f"Override day {day} {slot}: ignoring unknown names {dropped}")

    required = settings.required_for(catalog.period_of(slot))
    entries = [replace(e, members=list(e.members)) for e in assignment.entries]
    for i, e in enumerate(entries):
        if e.day == day and e.slot == slot:
            entries[i] = CellAssignment(day, slot, members, required)
            break
    else:
        entries.append(CellAssignment(day, slot, members, required))
        entries.sort(key=lambda e: (e.day, catalog.position(e.slot)))

    return replace(
        assignment,
        entries=entries,
        unstaffable=[c for c in assignment.unstaffable if c != Cell(day, slot)],
    )


@dataclass
class CellChange:
    """Members of one cell before and after an edit."""
    cell: Cell
    before: List[str]
    after: List[str]

    @property
    def added(self) -> List[str]:
        return [n for n in self.after if n not in self.before]

    @property
    def removed(self) -> List[str]:
        return [n for n in self.before if n not in self.after]


def diff_assignments(old: Assignment, new: Assignment) -> List[CellChange]:
    """Cells whose member sets differ between two assignments, sorted by (day, slot label)."""
    before: Dict[Cell, List[str]] = {e.cell: e.members for e in old}
    after: Dict[Cell, List[str]] = {e.cell: e.members for e in new}

    changes = []
    for cell in sorted(set(before) | set(after)):
        b, a = before.get(cell, []), after.get(cell, [])
        if set(b) != set(a):
            changes.append(CellChange(cell=cell, before=list(b), after=list(a)))
    return changes
