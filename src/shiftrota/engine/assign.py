"""
Fair Assignment Pass
====================
Greedy, fairness-ranked staffing of every cell, repeated until the load
spread settles.

Algorithm:
    - Walk cells in priority order (scarcest first)
    - Per cell, keep eligible people still under the weekly cap
    - Rank them by (load, load / weekly availability, -weekly availability)
    - Take up to min(required headcount, eligible count)
    - Repeat the whole walk from zero loads up to ``max_iterations`` times;
      stop once max - min load is <= 1, or <= 2 after the second pass
"""
import functools
import random
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from shiftrota.models.assignment import Assignment, CellAssignment
from shiftrota.models.person import Person
from shiftrota.models.settings import SchedulerSettings
from shiftrota.models.slot import Cell, SlotCatalog
from shiftrota.utils.logging_setup import EngineLogger, get_logger, log_function_call
from shiftrota.utils.structured_logging import get_structured_logger

from .availability import AvailabilityIndex, build_availability_index
from .priority import order_cells
from .summary import load_spread

logger = get_logger("shiftrota.engine.assign")
slog = get_structured_logger("shiftrota.engine")

RATIO_EPSILON = 1e-5


@dataclass
class PassResult:
    """Outcome of one walk over the ordered cells."""
    entries: List[CellAssignment]
    load: Dict[str, int]

    @property
    def spread(self) -> Optional[int]:
        """max - min load over people with nonzero load; None if nobody worked."""
        return load_spread(self.load)


def compare_candidates(a: str, b: str, load: Dict[str, int], index: AvailabilityIndex) -> int:
    """
    Fairness comparator, ascending = picked first.

    1. Fewer assignments so far
    2. Lower load / weekly availability (near-equal ratios tie)
    3. More weekly availability
    """
    if load[a] != load[b]:
        return load[a] - load[b]

    ratio_a = load[a] / index.denominator(a)
    ratio_b = load[b] / index.denominator(b)
    if abs(ratio_a - ratio_b) > RATIO_EPSILON:
        return -1 if ratio_a < ratio_b else 1

    return index.total(b) - index.total(a)


def rank_candidates(
    candidates: List[str],
    load: Dict[str, int],
    index: AvailabilityIndex,
    rng: Optional[random.Random] = None,
) -> List[str]:
    """
    Sort candidates by the fairness comparator.

    The sort is stable, so remaining ties keep roster order unless ``rng``
    shuffles the candidates first.
    """
    pool = list(candidates)
    if rng is not None:
        rng.shuffle(pool)
    return sorted(
        pool,
        key=functools.cmp_to_key(lambda a, b: compare_candidates(a, b, load, index)),
    )


def run_pass(
    order: Sequence[Cell],
    index: AvailabilityIndex,
    settings: SchedulerSettings,
    rng: Optional[random.Random] = None,
) -> PassResult:
    """One walk over the ordered cells, starting from zero load."""
    catalog = index.catalog
    load: Dict[str, int] = {name: 0 for name in index.totals}
    entries: List[CellAssignment] = []

    for cell in order:
        eligible = index.eligible_for(cell)
        required = settings.required_for(catalog.period_of(cell.slot))
        wanted = min(required, len(eligible))

        under_cap = [n for n in eligible if load[n] < settings.weekly_cap]
        if not under_cap:
            logger.debug(f"day {cell.day} {cell.slot}: everyone eligible is at the cap")
            entries.append(CellAssignment(cell.day, cell.slot, [], required))
            continue

        picked = rank_candidates(under_cap, load, index, rng)[:wanted]
        for name in picked:
            load[name] += 1
        entries.append(CellAssignment(cell.day, cell.slot, picked, required))

    return PassResult(entries=entries, load=load)


def is_settled(spread: Optional[int], completed: int) -> bool:
    """Stopping rule for the repair loop."""
    if spread is None:
        return False
    return spread <= 1 or (spread <= 2 and completed >= 2)


@log_function_call
def generate_assignment(
    roster: Sequence[Person],
    catalog: SlotCatalog,
    settings: SchedulerSettings,
) -> Assignment:
    """
    Assign people to every staffable cell of the week.

    Never fails on infeasible input: cells that cannot reach their headcount
    come back under-filled (see ``CellAssignment.deficit``).

    Args:
        roster: Ordered people (names must be unique)
        catalog: Validated slot catalog
        settings: Headcounts, weekly cap, repair iterations, optional seed

    Returns:
        Freshly built Assignment, entries in calendar order

    Raises:
        ConfigurationError: non-positive settings
    """
    settings.validate()
    elog = EngineLogger("shiftrota.engine.assign")
    elog.phase("Shift assignment")
    slog.info(
        "assignment_started",
        people=len(roster),
        catalog=catalog.name,
        day_headcount=settings.day_headcount,
        night_headcount=settings.night_headcount,
        weekly_cap=settings.weekly_cap,
    )

    index = build_availability_index(roster, catalog)
    order = order_cells(index)
    elog.step(f"{len(order)} staffable cells, {len(index.empty_cells)} with nobody available")

    rng = random.Random(settings.seed) if settings.seed is not None else None

    result = PassResult(entries=[], load={name: 0 for name in index.totals})
    completed = 0
    for _ in range(settings.max_iterations):
        result = run_pass(order, index, settings, rng)
        completed += 1
        elog.detail(f"iteration {completed} spread", result.spread)
        if is_settled(result.spread, completed):
            break

    entries = sorted(result.entries, key=lambda e: (e.day, catalog.position(e.slot)))
    assignment = Assignment(
        entries=entries,
        unstaffable=index.empty_cells,
        iterations=completed,
        spread=result.spread,
    )

    elog.check(
        "headcount",
        assignment.total_deficit == 0,
        f"{len(assignment.underfilled)} cells short by {assignment.total_deficit}",
    )
    slog.info("assignment_finished", **assignment.summary())
    return assignment

