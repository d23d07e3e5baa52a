"""Excel and CSV export of a weekly assignment."""
from pathlib import Path
from typing import Optional, Sequence, Union
import io

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter

from shiftrota.engine.summary import calculate_person_stats, stats_to_dict_list
from shiftrota.engine.validation import validate_assignment
from shiftrota.models.assignment import Assignment
from shiftrota.models.person import Person
from shiftrota.models.settings import SchedulerSettings
from shiftrota.models.slot import Cell, Period, SlotCatalog
from shiftrota.models.week import DAY_NAMES
from shiftrota.utils.logging_setup import get_logger

logger = get_logger("shiftrota.io.excel_export")

PERIOD_COLORS = {
    Period.DAY: "DDEEFF",
    Period.NIGHT: "E6CCFF",
}
SHORT_COLOR = "FFC7CE"
EMPTY_COLOR = "EEEEEE"

THIN = Side(border_style="thin", color="CCCCCC")
BORDER_THIN = Border(top=THIN, bottom=THIN, left=THIN, right=THIN)


def _fill(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


def _write_header_row(ws, values, row: int = 1):
    for j, val in enumerate(values, start=1):
        cell = ws.cell(row=row, column=j, value=val)
        cell.font = Font(bold=True)
        cell.alignment = Alignment(horizontal="center", vertical="center")


def _write_grid(ws, assignment: Assignment, catalog: SlotCatalog):
    """Slot rows x day columns; short cells in red, cells nobody can work in grey."""
    _write_header_row(ws, ["Slot"] + DAY_NAMES)
    unstaffable = set(assignment.unstaffable)

    for r, slot in enumerate(catalog, start=2):
        ws.cell(row=r, column=1, value=slot.label).font = Font(bold=True)
        for day in range(7):
            entry = assignment.get(day, slot.label)
            value = ", ".join(entry.members) if entry and entry.members else "-"
            cell = ws.cell(row=r, column=day + 2, value=value)
            cell.alignment = Alignment(horizontal="center", vertical="center", wrap_text=True)
            cell.border = BORDER_THIN

            if entry is not None and entry.deficit:
                cell.fill = _fill(SHORT_COLOR)
            elif entry is None and Cell(day, slot.label) in unstaffable:
                cell.fill = _fill(EMPTY_COLOR)
            else:
                cell.fill = _fill(PERIOD_COLORS[slot.period])

    ws.column_dimensions["A"].width = 14
    for i in range(2, 9):
        ws.column_dimensions[get_column_letter(i)].width = 22
    ws.freeze_panes = "B2"


def export_to_excel(
    assignment: Assignment,
    roster: Sequence[Person],
    catalog: SlotCatalog,
    output: Union[str, Path, io.BytesIO],
    settings: Optional[SchedulerSettings] = None,
) -> None:
    """
    Export an assignment to an Excel workbook.

    Sheets: ``Dashboard`` (run summary, plus validation counts when
    ``settings`` is given), ``Grid`` (the week) and ``People`` (per-person
    statistics).

    Args:
        assignment: Computed or edited assignment
        roster: Ordered people
        catalog: Slot catalog the assignment was built on
        output: File path or BytesIO buffer
        settings: Settings to validate against (optional)
    """
    wb = Workbook()

    # Dashboard
    ws_db = wb.active
    ws_db.title = "Dashboard"
    rows = [["Metric", "Value"], ["People", len(roster)], ["Catalog", catalog.name]]
    rows += [[k, v if v is not None else "-"] for k, v in assignment.summary().items()]
    for i, row_data in enumerate(rows, start=1):
        for j, val in enumerate(row_data, start=1):
            cell = ws_db.cell(row=i, column=j, value=val)
            if i == 1:
                cell.font = Font(bold=True)

    if settings is not None:
        result = validate_assignment(assignment, roster, catalog, settings)
        start = len(rows) + 3
        ws_db.cell(row=start - 1, column=1, value="Validation").font = Font(bold=True)
        for i, (key, val) in enumerate(result.as_dict().items()):
            ws_db.cell(row=start + i, column=1, value=key)
            ws_db.cell(row=start + i, column=2, value=val)

    for i in range(1, 3):
        ws_db.column_dimensions[get_column_letter(i)].width = 24
    ws_db.freeze_panes = "A2"

    # Grid
    _write_grid(wb.create_sheet("Grid"), assignment, catalog)

    # People
    ws_p = wb.create_sheet("People")
    stats = stats_to_dict_list(calculate_person_stats(assignment, roster, catalog))
    if stats:
        columns = list(stats[0])
        _write_header_row(ws_p, columns)
        for i, row in enumerate(stats, start=2):
            for j, col in enumerate(columns, start=1):
                ws_p.cell(row=i, column=j, value=row[col])
        for i in range(1, len(columns) + 1):
            ws_p.column_dimensions[get_column_letter(i)].width = 14
        ws_p.freeze_panes = "A2"

    if isinstance(output, io.BytesIO):
        wb.save(output)
    else:
        wb.save(str(output))
    logger.info(f"Exported {len(assignment)} cells to Excel")


def export_to_csv(assignment: Assignment, output: Union[str, Path, io.StringIO]) -> None:
    """Export one row per (day, slot, person) to CSV."""
    df = assignment.to_dataframe()
    if isinstance(output, io.StringIO):
        df.to_csv(output, index=False)
    else:
        df.to_csv(str(output), index=False)
