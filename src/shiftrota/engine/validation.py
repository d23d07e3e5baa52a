"""
Assignment Validation
=====================
Check an assignment (engine output or manually edited) against the roster
and settings, and count every broken invariant.
"""
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from shiftrota.models.assignment import Assignment
from shiftrota.models.person import Person
from shiftrota.models.settings import SchedulerSettings
from shiftrota.models.slot import SlotCatalog
from shiftrota.utils.logging_setup import get_logger, log_check

from .summary import shift_summary

logger = get_logger("shiftrota.engine.validation")


@dataclass
class Violation:
    """Single violation with details."""
    type: str      # "unavailable", "cap_exceeded", "overstaffed", "duplicate_member", ...
    severity: str  # "critical", "warning"
    message: str
    day: int = -1
    slot: str = ""
    person: str = ""


@dataclass
class ValidationResult:
    """Violation counts for an assignment."""
    unavailable: int = 0          # person assigned outside their availability
    cap_exceeded: int = 0         # people above the weekly cap
    overstaffed: int = 0          # cells above min(required, eligible)
    duplicate_members: int = 0    # same person twice in one cell
    unknown_people: int = 0       # names not in the roster
    duplicate_names: int = 0      # roster names used more than once
    deficit: int = 0              # missing headcount (infeasibility, not an error)

    violations: List[Violation] = field(default_factory=list)

    def add_violation(self, v: Violation):
        self.violations.append(v)

    def as_dict(self) -> Dict[str, int]:
        return {
            "unavailable": self.unavailable,
            "cap_exceeded": self.cap_exceeded,
            "overstaffed": self.overstaffed,
            "duplicate_members": self.duplicate_members,
            "unknown_people": self.unknown_people,
            "duplicate_names": self.duplicate_names,
            "deficit": self.deficit,
        }

    @property
    def is_valid(self) -> bool:
        """True when no critical violation was found. Deficits do not count."""
        return not self.get_critical_violations()

    def get_critical_violations(self) -> List[Violation]:
        return [v for v in self.violations if v.severity == "critical"]

    def get_warnings(self) -> List[Violation]:
        return [v for v in self.violations if v.severity == "warning"]


def validate_assignment(
    assignment: Assignment,
    roster: Sequence[Person],
    catalog: SlotCatalog,
    settings: SchedulerSettings,
) -> ValidationResult:
    """
    Validate an assignment and count violations.

    Args:
        assignment: Assignment to check
        roster: Ordered people
        catalog: Slot catalog
        settings: Headcounts and weekly cap

    Returns:
        ValidationResult with all counts and the detailed violation list
    """
    result = ValidationResult()
    by_name = {p.name: p for p in roster}

    name_counts = Counter(p.name for p in roster)
    for name, count in name_counts.items():
        if count > 1:
            result.duplicate_names += 1
            result.add_violation(Violation(
                type="duplicate_name",
                severity="warning",
                person=name,
                message=f"{name} appears {count} times in the roster",
            ))

    for entry in assignment:
        required = settings.required_for(catalog.period_of(entry.slot))
        eligible = sum(1 for p in roster if p.is_available(entry.day, entry.slot))
        where = f"day {entry.day} {entry.slot}"

        for name, count in Counter(entry.members).items():
            if count > 1:
                result.duplicate_members += 1
                result.add_violation(Violation(
                    type="duplicate_member", severity="critical",
                    day=entry.day, slot=entry.slot, person=name,
                    message=f"{where}: {name} assigned {count} times",
                ))

        for name in dict.fromkeys(entry.members):
            person = by_name.get(name)
            if person is None:
                result.unknown_people += 1
                result.add_violation(Violation(
                    type="unknown_person", severity="critical",
                    day=entry.day, slot=entry.slot, person=name,
                    message=f"{where}: {name} is not on the roster",
                ))
            elif not person.is_available(entry.day, entry.slot):
                result.unavailable += 1
                result.add_violation(Violation(
                    type="unavailable", severity="critical",
                    day=entry.day, slot=entry.slot, person=name,
                    message=f"{where}: {name} is not available",
                ))

        if len(entry.members) > min(required, eligible):
            result.overstaffed += 1
            result.add_violation(Violation(
                type="overstaffed", severity="critical",
                day=entry.day, slot=entry.slot,
                message=f"{where}: {len(entry.members)} assigned, at most {min(required, eligible)} allowed",
            ))

        result.deficit += max(0, required - len(entry.members))

    for name, total in shift_summary(assignment, roster).items():
        if total > settings.weekly_cap:
            result.cap_exceeded += 1
            result.add_violation(Violation(
                type="cap_exceeded", severity="critical", person=name,
                message=f"{name}: {total} assignments, cap is {settings.weekly_cap}",
            ))

    log_check(logger, "assignment invariants", result.is_valid,
              ", ".join(f"{k}={v}" for k, v in result.as_dict().items() if v))
    return result
