"""JSON adapter for seed documents and file-backed repositories."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from datetime import date, datetime
from pathlib import Path
from typing import Any, Callable

from adhd_os.schema import (
    BLOCK_TYPES,
    LEVELS,
    MOODS,
    AnxietyLog,
    DailyReflection,
    Task,
    TimeBlock,
)

logger = logging.getLogger(__name__)

COLLECTIONS = ("tasks", "time_blocks", "anxiety_logs", "reflections")


def _require(item: dict, fields: tuple[str, ...], index: int) -> None:
    missing = [field for field in fields if item.get(field) in (None, "")]
    if missing:
        raise ValueError(f"Item {index}: missing required fields {missing}")


def _choice(item: dict, field: str, allowed: tuple[str, ...], default: str, index: int) -> str:
    value = str(item.get(field) or default).strip()
    if value not in allowed:
        raise ValueError(f"Item {index}: invalid {field} '{value}'")
    return value


def _clock(item: dict, field: str, index: int) -> str:
    value = str(item[field]).strip()
    try:
        datetime.strptime(value, "%H:%M")
    except ValueError as exc:
        raise ValueError(f"Item {index}: malformed {field} '{value}'") from exc
    return value


def _iso_date(item: dict, field: str, index: int) -> str:
    value = str(item[field]).strip()
    try:
        date.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(f"Item {index}: malformed {field} '{value}'") from exc
    return value


def _flag(item: dict, field: str, index: int) -> bool:
    value = item.get(field, False)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"Item {index}: {field} must be true or false, got {value!r}")
    return value


def _int(item: dict, field: str, index: int) -> int:
    try:
        return int(item[field])
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Item {index}: invalid {field}") from exc


def parse_time_block(item: dict, index: int) -> TimeBlock:
    _require(item, ("id", "title", "start_time", "end_time", "date"), index)
    return TimeBlock(
        id=str(item["id"]).strip(),
        title=str(item["title"]),
        start_time=_clock(item, "start_time", index),
        end_time=_clock(item, "end_time", index),
        date=_iso_date(item, "date", index),
        type=_choice(item, "type", BLOCK_TYPES, "task", index),
        priority=_choice(item, "priority", LEVELS, "medium", index),
        energy_required=_choice(item, "energy_required", LEVELS, "medium", index),
        description=str(item.get("description") or ""),
    )


def parse_task(item: dict, index: int) -> Task:
    _require(item, ("id", "title", "estimated_minutes"), index)
    estimated = _int(item, "estimated_minutes", index)
    if estimated <= 0:
        raise ValueError(f"Item {index}: estimated_minutes must be positive")

    actual = None
    if item.get("actual_minutes") is not None:
        actual = _int(item, "actual_minutes", index)

    return Task(
        id=str(item["id"]).strip(),
        title=str(item["title"]),
        priority=_choice(item, "priority", LEVELS, "medium", index),
        estimated_minutes=estimated,
        energy_required=_choice(item, "energy_required", LEVELS, "medium", index),
        completed=_flag(item, "completed", index),
        actual_minutes=actual,
        description=item.get("description") or None,
        category=item.get("category") or None,
    )


def parse_anxiety_log(item: dict, index: int) -> AnxietyLog:
    _require(item, ("id", "trigger", "anxiety_level", "timestamp"), index)
    level = _int(item, "anxiety_level", index)
    if not 1 <= level <= 10:
        raise ValueError(f"Item {index}: anxiety_level out of range")

    try:
        timestamp = datetime.fromisoformat(str(item["timestamp"]))
    except ValueError as exc:
        raise ValueError(f"Item {index}: malformed timestamp") from exc

    return AnxietyLog(
        id=str(item["id"]).strip(),
        trigger=str(item["trigger"]),
        anxiety_level=level,
        coping_strategy=str(item.get("coping_strategy") or ""),
        outcome=str(item.get("outcome") or ""),
        priority_maintained=_flag(item, "priority_maintained", index),
        timestamp=timestamp,
    )


def parse_reflection(item: dict, index: int) -> DailyReflection:
    _require(item, ("id", "date", "energy_level", "focus_quality", "anxiety_level"), index)
    return DailyReflection(
        id=str(item["id"]).strip(),
        date=_iso_date(item, "date", index),
        energy_level=_int(item, "energy_level", index),
        focus_quality=_int(item, "focus_quality", index),
        anxiety_level=_int(item, "anxiety_level", index),
        accomplishments=str(item.get("accomplishments") or ""),
        challenges=str(item.get("challenges") or ""),
        improvements=str(item.get("improvements") or ""),
        mood=_choice(item, "mood", MOODS, "neutral", index),
    )


PARSERS: dict[str, Callable[[dict, int], Any]] = {
    "tasks": parse_task,
    "time_blocks": parse_time_block,
    "anxiety_logs": parse_anxiety_log,
    "reflections": parse_reflection,
}


def to_dict(entity: Any) -> dict:
    """Serialize an entity dataclass into JSON-compatible values."""

    payload = asdict(entity)
    for key, value in payload.items():
        if isinstance(value, datetime):
            payload[key] = value.isoformat()
    return payload


def parse(file_path: str) -> dict[str, list]:
    """Parse a seed document into entity collections keyed by collection name.

    Only the collections present in the document are returned.
    """

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if not isinstance(payload, dict):
        raise ValueError("JSON seed must be an object of collections")

    unknown = sorted(set(payload) - set(COLLECTIONS))
    if unknown:
        raise ValueError(f"Unknown collections {unknown}")

    collections: dict[str, list] = {}
    for name in COLLECTIONS:
        if name not in payload:
            continue
        items = payload[name]
        if not isinstance(items, list):
            raise ValueError(f"Collection '{name}' must be a list of objects")
        collections[name] = [PARSERS[name](item, i) for i, item in enumerate(items, start=1)]

    logger.debug("Parsed seed file %s: %s", file_path, {name: len(items) for name, items in collections.items()})
    return collections


class JsonFileRepository:
    """Repository that keeps one collection in a JSON array on disk."""

    def __init__(self, path: Path | str, collection: str) -> None:
        if collection not in PARSERS:
            raise ValueError(f"Unknown collection '{collection}'")
        self.path = Path(path)
        self.collection = collection

    def list(self) -> list:
        if not self.path.exists():
            return []
        with open(self.path, encoding="utf-8") as handle:
            payload = json.load(handle)
        if not isinstance(payload, list):
            raise ValueError(f"{self.path}: expected a list of objects")
        parser = PARSERS[self.collection]
        return [parser(item, i) for i, item in enumerate(payload, start=1)]

    def create(self, item):
        items = self.list()
        if any(existing.id == item.id for existing in items):
            raise ValueError(f"duplicate id '{item.id}'")
        self._write([*items, item])
        return item

    def update(self, item):
        items = self.list()
        for position, existing in enumerate(items):
            if existing.id == item.id:
                items[position] = item
                self._write(items)
                return item
        raise KeyError(item.id)

    def initialize(self, items: list) -> bool:
        """Write ``items`` unless the file already exists; True when written."""

        if self.path.exists():
            return False
        self._write(list(items))
        return True

    def _write(self, items: list) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps([to_dict(item) for item in items], indent=2), encoding="utf-8")
        tmp_path.replace(self.path)
        logger.debug("Wrote %d %s to %s", len(items), self.collection, self.path)


def seed_file(path: Path | str, collections: dict[str, list]) -> None:
    """Write entity collections as a seed document."""

    payload = {name: [to_dict(item) for item in collections.get(name, [])] for name in COLLECTIONS}
    Path(path).write_text(json.dumps(payload, indent=2), encoding="utf-8")
