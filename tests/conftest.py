"""Pytest configuration and fixtures."""
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from shiftrota.models.person import Person
from shiftrota.models.settings import SchedulerSettings
from shiftrota.models.slot import FOUR_HOUR_CATALOG, SIX_HOUR_CATALOG
from shiftrota.utils.structured_logging import clear_context, configure_structlog

DAY_SLOTS = ["06:00-12:00", "12:00-18:00"]
NIGHT_SLOTS = ["18:00-00:00", "00:00-06:00"]


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach handlers added by setup_logging (closed files, captured streams)."""
    yield
    logger = logging.getLogger("shiftrota")
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    configure_structlog()
    clear_context()


@pytest.fixture
def catalog():
    """Four six-hour slots per day (28 cells per week)."""
    return SIX_HOUR_CATALOG


@pytest.fixture
def four_hour_catalog():
    return FOUR_HOUR_CATALOG


@pytest.fixture
def default_settings():
    """One person per cell, cap of 10."""
    return SchedulerSettings(day_headcount=1, night_headcount=1, weekly_cap=10)


@pytest.fixture
def sample_roster():
    """A small team with uneven availability."""
    return [
        Person.fully_available("Alice", SIX_HOUR_CATALOG),
        Person(name="Bob", availability={d: DAY_SLOTS for d in range(7)}),
        Person(name="Charlie", availability={d: NIGHT_SLOTS for d in range(7)}),
        Person(name="Diana", availability={0: DAY_SLOTS + NIGHT_SLOTS, 6: DAY_SLOTS}),
        Person(name="Eve", availability={1: ["06:00-12:00"], 3: ["06:00-12:00"]}),
    ]


@pytest.fixture
def roster_csv(tmp_path):
    """Roster CSV in the wide day-column layout."""
    path = tmp_path / "team.csv"
    path.write_text(
        "id,name,Sun,Mon,Tue,Wed,Thu,Fri,Sat\n"
        "a1,Alice,06:00-12:00|12:00-18:00|18:00-00:00|00:00-06:00,06:00-12:00,,,,,\n"
        "b2,Bob,,06:00-12:00|12:00-18:00,06:00-12:00,,,,18:00-00:00\n"
        ",Cy,00:00-06:00,,,,,,\n",
        encoding="utf-8",
    )
    return path
