"""Priority ordering: scarcest cells first."""
from typing import List

from shiftrota.models.slot import Cell
from shiftrota.utils.logging_setup import get_logger, log_function_call

from .availability import AvailabilityIndex

logger = get_logger("shiftrota.engine.priority")


def priority_key(index: AvailabilityIndex, cell: Cell):
    """(eligible count, day, catalog position), ascending."""
    return (len(index.eligible_for(cell)), cell.day, index.catalog.position(cell.slot))


@log_function_call
def order_cells(index: AvailabilityIndex) -> List[Cell]:
    """
    Order staffable cells so the hardest to fill come first.

    Cells with no eligible person are left out. The result is reused
    unchanged across repair iterations.
    """
    ordered = sorted(index.candidate_cells, key=lambda c: priority_key(index, c))
    if ordered:
        first = ordered[0]
        logger.debug(
            f"{len(ordered)} cells ordered; scarcest: day {first.day} {first.slot} "
            f"({len(index.eligible_for(first))} eligible)"
        )
    return ordered
