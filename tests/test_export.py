"""Tests for Excel and CSV export."""
import io

import pandas as pd
import pytest
from openpyxl import load_workbook

from shiftrota.engine.assign import generate_assignment
from shiftrota.io.excel_export import SHORT_COLOR, export_to_csv, export_to_excel
from shiftrota.models.settings import SchedulerSettings


@pytest.fixture
def settings():
    return SchedulerSettings(day_headcount=2, weekly_cap=8)


@pytest.fixture
def assignment(sample_roster, catalog, settings):
    return generate_assignment(sample_roster, catalog, settings)


class TestCSVExport:

    def test_export_to_csv_buffer(self, assignment):
        """Test CSV export to StringIO."""
        buf = io.StringIO()
        export_to_csv(assignment, buf)

        df = pd.read_csv(io.StringIO(buf.getvalue()))
        assert list(df.columns) == ["day", "day_name", "slot", "name"]
        assert len(df) == sum(len(e.members) for e in assignment)

    def test_export_to_csv_file(self, assignment, tmp_path):
        out = tmp_path / "week.csv"
        export_to_csv(assignment, out)
        assert out.exists()


class TestExcelExport:

    def test_export_to_excel_buffer(self, assignment, sample_roster, catalog):
        """Test Excel export to BytesIO."""
        buf = io.BytesIO()
        export_to_excel(assignment, sample_roster, catalog, buf)
        assert len(buf.getvalue()) > 0

    def test_excel_has_sheets(self, assignment, sample_roster, catalog, tmp_path):
        out = tmp_path / "week.xlsx"
        export_to_excel(assignment, sample_roster, catalog, out)

        wb = load_workbook(out)
        assert wb.sheetnames == ["Dashboard", "Grid", "People"]

    def test_grid_contents(self, assignment, sample_roster, catalog):
        buf = io.BytesIO()
        export_to_excel(assignment, sample_roster, catalog, buf)

        ws = load_workbook(io.BytesIO(buf.getvalue()))["Grid"]
        assert [c.value for c in ws[1]] == ["Slot", "Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
        assert ws.cell(row=2, column=1).value == "06:00-12:00"
        expected = ", ".join(assignment.members(0, "06:00-12:00")) or "-"
        assert ws.cell(row=2, column=2).value == expected

    def test_short_cells_highlighted(self, assignment, sample_roster, catalog):
        short = assignment.underfilled[0]
        buf = io.BytesIO()
        export_to_excel(assignment, sample_roster, catalog, buf)

        ws = load_workbook(io.BytesIO(buf.getvalue()))["Grid"]
        cell = ws.cell(row=catalog.position(short.slot) + 2, column=short.day + 2)
        assert cell.fill.start_color.rgb.endswith(SHORT_COLOR)

    def test_excel_with_validation(self, assignment, sample_roster, catalog, settings):
        buf = io.BytesIO()
        export_to_excel(assignment, sample_roster, catalog, buf, settings=settings)

        ws = load_workbook(io.BytesIO(buf.getvalue()))["Dashboard"]
        labels = [ws.cell(row=r, column=1).value for r in range(1, ws.max_row + 1)]
        assert "Validation" in labels
        assert "unavailable" in labels

    def test_people_sheet(self, assignment, sample_roster, catalog):
        buf = io.BytesIO()
        export_to_excel(assignment, sample_roster, catalog, buf)

        ws = load_workbook(io.BytesIO(buf.getvalue()))["People"]
        assert ws.cell(row=1, column=1).value == "name"
        assert [ws.cell(row=r, column=1).value for r in range(2, 7)] == [
            "Alice", "Bob", "Charlie", "Diana", "Eve",
        ]
