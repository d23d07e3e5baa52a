"""CSV loading for roster snapshots."""
from pathlib import Path
from typing import List, Union

import pandas as pd

from shiftrota.models.person import Person
from shiftrota.models.week import DAY_NAMES, normalize_day
from shiftrota.utils.logging_setup import get_logger

logger = get_logger("shiftrota.io.roster_loader")

SLOT_SEPARATOR = "|"


def _split_slots(value) -> List[str]:
    """Split a ``06:00-12:00|12:00-18:00`` cell into labels."""
    if value is None:
        return []
    return [s.strip() for s in str(value).split(SLOT_SEPARATOR) if s.strip()]


def load_roster(source: Union[str, Path, pd.DataFrame]) -> List[Person]:
    """
    Load a roster from a CSV file or DataFrame.

    Expected columns: ``name``, optional ``id``, and one column per day
    (``Sun``..``Sat``, any alias ``normalize_day`` accepts) holding
    ``|``-separated slot labels. An empty or missing day column means
    unavailable that day.

    Args:
        source: Path to CSV file or pandas DataFrame

    Returns:
        List of Person objects, in file order
    """
    if isinstance(source, pd.DataFrame):
        df = source.copy()
    else:
        df = pd.read_csv(source, dtype=str, keep_default_na=False)

    df = df.fillna("")

    if "name" not in df.columns:
        raise ValueError("CSV must have a 'name' column")

    day_columns = {}
    for col in df.columns:
        if col in ("name", "id"):
            continue
        try:
            day_columns[col] = normalize_day(col)
        except ValueError:
            logger.debug(f"Ignoring column {col!r}")

    people = []
    for idx, row in df.iterrows():
        name = str(row["name"]).strip()
        if not name:
            continue

        availability = {}
        for col, day in day_columns.items():
            slots = _split_slots(row[col])
            if slots:
                availability.setdefault(day, set()).update(slots)

        people.append(Person(
            name=name,
            availability=availability,
            id=str(row.get("id", "") or "").strip(),
        ))

    seen = set()
    for p in people:
        if p.name in seen:
            logger.warning(f"Duplicate name in roster: {p.name}")
        seen.add(p.name)

    logger.info(f"Loaded {len(people)} people")
    return people


def roster_to_dataframe(people: List[Person]) -> pd.DataFrame:
    """Convert a roster to the wide CSV layout ``load_roster`` reads."""
    columns = ["id", "name"] + DAY_NAMES
    if not people:
        return pd.DataFrame(columns=columns)
    rows = [
        {
            "id": p.id,
            "name": p.name,
            **{
                DAY_NAMES[d]: SLOT_SEPARATOR.join(sorted(p.slots_on(d)))
                for d in range(7)
            },
        }
        for p in people
    ]
    return pd.DataFrame(rows, columns=columns)


def save_roster(people: List[Person], path: Union[str, Path]) -> None:
    """
    Save a roster to CSV.

    Args:
        people: List of Person objects
        path: Output path
    """
    roster_to_dataframe(people).to_csv(path, index=False)
    logger.info(f"Saved {len(people)} people to {path}")
