"""CSV adapter for task lists."""

from __future__ import annotations

import csv

from adhd_os.schema import LEVELS, Task

_REQUIRED_FIELDS = ("id", "title", "estimated_minutes")
_TRUE_VALUES = {"1", "true", "yes", "y"}


def _parse_int(raw: str, field: str, row_number: int) -> int:
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Row {row_number}: invalid {field}") from exc


def _parse_level(row: dict, field: str, row_number: int) -> str:
    value = (row.get(field) or "medium").strip().lower()
    if value not in LEVELS:
        raise ValueError(f"Row {row_number}: invalid {field} '{value}'")
    return value


def _parse_row(row: dict, row_number: int) -> Task:
    missing = [field for field in _REQUIRED_FIELDS if not row.get(field)]
    if missing:
        raise ValueError(f"Row {row_number}: missing required fields {missing}")

    estimated = _parse_int(row["estimated_minutes"], "estimated_minutes", row_number)
    if estimated <= 0:
        raise ValueError(f"Row {row_number}: estimated_minutes must be positive")

    actual_raw = row.get("actual_minutes")
    actual = None
    if actual_raw not in (None, ""):
        actual = _parse_int(actual_raw, "actual_minutes", row_number)

    description = (row.get("description") or "").strip() or None
    category = (row.get("category") or "").strip() or None

    return Task(
        id=row["id"].strip(),
        title=row["title"].strip(),
        priority=_parse_level(row, "priority", row_number),
        estimated_minutes=estimated,
        energy_required=_parse_level(row, "energy_required", row_number),
        completed=(row.get("completed") or "").strip().lower() in _TRUE_VALUES,
        actual_minutes=actual,
        description=description,
        category=category,
    )


def parse(file_path: str) -> list[Task]:
    """Parse a CSV file of tasks."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        tasks: list[Task] = []
        for row_number, row in enumerate(reader, start=2):
            tasks.append(_parse_row(row, row_number))
        return tasks
