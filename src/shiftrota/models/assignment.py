"""Assignment models: who works which (day, slot) cell."""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple

import pandas as pd

from .slot import Cell, SlotCatalog
from .week import DAY_NAMES

UNFILLED = "-"


@dataclass
class CellAssignment:
    """Members assigned to one cell, against the headcount it required."""
    day: int
    slot: str
    members: List[str] = field(default_factory=list)
    required: int = 0

    @property
    def cell(self) -> Cell:
        return Cell(self.day, self.slot)

    @property
    def deficit(self) -> int:
        """Missing headcount (never negative)."""
        return max(0, self.required - len(self.members))

    @property
    def is_filled(self) -> bool:
        return self.deficit == 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "day": self.day,
            "slot": self.slot,
            "members": list(self.members),
            "required": self.required,
        }


@dataclass
class Assignment:
    """Weekly assignment produced by the engine."""

    entries: List[CellAssignment] = field(default_factory=list)
    # Cells nobody is available for; they have no entry
    unstaffable: List[Cell] = field(default_factory=list)

    # Run metrics
    iterations: int = 0
    spread: Optional[int] = None  # max - min load over people with nonzero load

    def __iter__(self) -> Iterator[CellAssignment]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def get(self, day: int, slot: str) -> Optional[CellAssignment]:
        """Entry for a cell, or None if the cell was never a candidate."""
        for entry in self.entries:
            if entry.day == day and entry.slot == slot:
                return entry
        return None

    def members(self, day: int, slot: str) -> List[str]:
        entry = self.get(day, slot)
        return list(entry.members) if entry else []

    def cells_for(self, name: str) -> List[Cell]:
        """Cells a person is assigned to."""
        return [e.cell for e in self.entries if name in e.members]

    @property
    def total_deficit(self) -> int:
        """Headcount missing across candidate cells."""
        return sum(e.deficit for e in self.entries)

    @property
    def underfilled(self) -> List[CellAssignment]:
        return [e for e in self.entries if e.deficit > 0]

    def to_records(self) -> List[Dict[str, Any]]:
        """One ``{day, slot, members, required}`` dict per entry."""
        return [e.to_dict() for e in self.entries]

    def to_dataframe(self) -> pd.DataFrame:
        """Long format: one row per (cell, member)."""
        rows = [
            {"day": e.day, "day_name": DAY_NAMES[e.day], "slot": e.slot, "name": m}
            for e in self.entries
            for m in e.members
        ]
        if not rows:
            return pd.DataFrame(columns=["day", "day_name", "slot", "name"])
        return pd.DataFrame(rows)

    def to_matrix(self, catalog: SlotCatalog) -> pd.DataFrame:
        """Slot x day grid of comma-joined names, ``-`` for unfilled cells."""
        grid: Dict[Tuple[str, int], str] = {}
        for e in self.entries:
            grid[(e.slot, e.day)] = ", ".join(e.members) if e.members else UNFILLED
        data = {
            DAY_NAMES[d]: [grid.get((label, d), UNFILLED) for label in catalog.labels]
            for d in range(7)
        }
        return pd.DataFrame(data, index=pd.Index(catalog.labels, name="slot"))

    def summary(self) -> Dict[str, Any]:
        """Summary dictionary for display."""
        return {
            "cells": len(self.entries),
            "filled": sum(1 for e in self.entries if e.is_filled),
            "underfilled": len(self.underfilled),
            "unstaffable": len(self.unstaffable),
            "deficit": self.total_deficit,
            "iterations": self.iterations,
            "spread": self.spread,
        }
