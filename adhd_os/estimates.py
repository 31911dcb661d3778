"""Task time-estimate accuracy and task card helpers."""

from __future__ import annotations

import logging
from typing import Optional

from adhd_os.schema import Task

logger = logging.getLogger(__name__)

_PRIORITY_VARIANTS = {"high": "destructive", "medium": "default", "low": "secondary"}
_ENERGY_COLORS = {"high": "red", "medium": "yellow", "low": "green"}
_BAND_COLORS = {"good": "green", "fair": "yellow", "poor": "red"}


def estimate_accuracy(estimated_minutes: float, actual_minutes: Optional[float]) -> Optional[float]:
    """Return how close the actual duration came to the estimate, in percent.

    The value is 100 for a perfect estimate and falls linearly with the
    deviation; it goes negative once the deviation exceeds the estimate.
    ``None`` when no actual time was recorded.
    """

    if actual_minutes is None or not estimated_minutes:
        return None
    return (1 - abs(actual_minutes - estimated_minutes) / estimated_minutes) * 100


def accuracy_band(accuracy: float) -> str:
    if accuracy >= 80:
        return "good"
    if accuracy >= 60:
        return "fair"
    return "poor"


def accuracy_color(accuracy: float) -> str:
    return _BAND_COLORS[accuracy_band(accuracy)]


def accuracy_label(task: Task) -> Optional[str]:
    accuracy = estimate_accuracy(task.estimated_minutes, task.actual_minutes)
    if accuracy is None:
        return None
    return f"{round(accuracy)}% accurate"


def progress_value(task: Task) -> Optional[float]:
    """Share of the estimate already spent, capped at 100."""

    if task.actual_minutes is None or not task.estimated_minutes:
        return None
    return min(task.actual_minutes / task.estimated_minutes * 100, 100)


def priority_variant(priority: str) -> str:
    return _PRIORITY_VARIANTS.get(priority, "default")


def energy_color(energy: str) -> str:
    return _ENERGY_COLORS.get(energy, "gray")


def toggle_timer(running: dict[str, bool], task_id: str) -> dict[str, bool]:
    """Flip the timer flag for one task; elapsed time is not tracked."""

    updated = dict(running)
    updated[task_id] = not running.get(task_id, False)
    logger.info("%s timer for task %s", "Starting" if updated[task_id] else "Pausing", task_id)
    return updated
