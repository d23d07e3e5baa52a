# shiftrota/engine - availability index, priority ordering, fair assignment
from .assign import generate_assignment, rank_candidates, run_pass
from .availability import AvailabilityIndex, build_availability_index
from .overrides import CellChange, apply_override, diff_assignments, parse_member_list
from .priority import order_cells
from .summary import (
    PersonStats,
    calculate_person_stats,
    load_spread,
    shift_summary,
    stats_to_dict_list,
)
from .validation import ValidationResult, Violation, validate_assignment

__all__ = [
    "generate_assignment",
    "run_pass",
    "rank_candidates",
    "build_availability_index",
    "AvailabilityIndex",
    "order_cells",
    "shift_summary",
    "load_spread",
    "calculate_person_stats",
    "stats_to_dict_list",
    "PersonStats",
    "validate_assignment",
    "ValidationResult",
    "Violation",
    "apply_override",
    "diff_assignments",
    "parse_member_list",
    "CellChange",
]
