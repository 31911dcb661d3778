"""Anxiety check-in classification and event logging."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from adhd_os.schema import AnxietyLog

logger = logging.getLogger(__name__)

MIN_LEVEL = 1
MAX_LEVEL = 10
PROMPT_ABOVE = 5

_BAND_COLORS = {"calm": "green", "moderate": "yellow", "elevated": "red"}
_CATEGORY_COLORS = {
    "breathing": "blue",
    "grounding": "green",
    "cognitive": "purple",
    "physical": "orange",
}


@dataclass(frozen=True)
class LogDraft:
    trigger: str = ""
    coping_strategy: str = ""
    outcome: str = ""
    priority_maintained: bool = False


def anxiety_band(level: int) -> str:
    """Map a 1-10 anxiety level to a colour band."""

    if level <= 3:
        return "calm"
    if level <= 6:
        return "moderate"
    return "elevated"


def anxiety_color(level: int) -> str:
    return _BAND_COLORS[anxiety_band(level)]


def should_prompt_coping(level: int) -> bool:
    """Whether the check-in should suggest a coping strategy."""

    return level > PROMPT_ABOVE


def strategy_color(category: str) -> str:
    return _CATEGORY_COLORS.get(category, "gray")


def priority_badge(log: AnxietyLog) -> str:
    return "Priorities Maintained" if log.priority_maintained else "Priorities Affected"


def build_log(draft: LogDraft, level: int, now: datetime | None = None) -> AnxietyLog:
    """Turn the check-in form into a log record stamped with the current time."""

    if not MIN_LEVEL <= level <= MAX_LEVEL:
        raise ValueError(f"anxiety level must be between {MIN_LEVEL} and {MAX_LEVEL}, got {level}")

    moment = now or datetime.now()
    record = AnxietyLog(
        id=str(int(moment.timestamp() * 1000)),
        trigger=draft.trigger,
        anxiety_level=level,
        coping_strategy=draft.coping_strategy,
        outcome=draft.outcome,
        priority_maintained=draft.priority_maintained,
        timestamp=moment,
    )
    logger.info("Logging anxiety event: %s", record)
    return record
