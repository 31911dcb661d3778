"""Reflection hub helpers: moods, insights and reflection summaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime

import numpy as np

from adhd_os.schema import DailyReflection, MOODS

logger = logging.getLogger(__name__)

_MOOD_EMOJI = {
    "accomplished": "🎯",
    "frustrated": "😤",
    "energized": "⚡",
    "calm": "😌",
    "overwhelmed": "😰",
}


@dataclass(frozen=True)
class ReflectionDraft:
    energy_level: int = 7
    focus_quality: int = 6
    anxiety_level: int = 4
    accomplishments: str = ""
    challenges: str = ""
    improvements: str = ""
    mood: str = "neutral"


def mood_emoji(mood: str) -> str:
    return _MOOD_EMOJI.get(mood, "😐")


def insight_color(insight_type: str, impact: str) -> str:
    if insight_type == "achievement":
        return "green"
    if impact == "high":
        return "red"
    if impact == "medium":
        return "yellow"
    return "blue"


def summarize(reflections: list[DailyReflection]) -> dict:
    """Average energy, focus and anxiety over a set of reflections."""

    if not reflections:
        return {
            "average_energy": 0.0,
            "average_focus": 0.0,
            "average_anxiety": 0.0,
            "days": 0,
        }

    scores = np.asarray(
        [[r.energy_level, r.focus_quality, r.anxiety_level] for r in reflections],
        dtype=float,
    )
    energy, focus, anxiety = scores.mean(axis=0)
    return {
        "average_energy": round(float(energy), 1),
        "average_focus": round(float(focus), 1),
        "average_anxiety": round(float(anxiety), 1),
        "days": len(reflections),
    }


def build_reflection(
    draft: ReflectionDraft,
    today: date | None = None,
    now: datetime | None = None,
) -> DailyReflection:
    """Stamp the reflection form with today's date."""

    if draft.mood not in MOODS:
        raise ValueError(f"unknown mood '{draft.mood}'")

    day = today or date.today()
    record = DailyReflection(
        id=str(int((now or datetime.now()).timestamp() * 1000)),
        date=day.isoformat(),
        energy_level=draft.energy_level,
        focus_quality=draft.focus_quality,
        anxiety_level=draft.anxiety_level,
        accomplishments=draft.accomplishments,
        challenges=draft.challenges,
        improvements=draft.improvements,
        mood=draft.mood,
    )
    logger.info("Saving reflection: %s", record)
    return record
