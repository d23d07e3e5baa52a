# shiftrota/io - Roster input, assignment export
from .excel_export import export_to_csv, export_to_excel
from .roster_loader import load_roster, roster_to_dataframe, save_roster

__all__ = [
    "load_roster",
    "roster_to_dataframe",
    "save_roster",
    "export_to_excel",
    "export_to_csv",
]
