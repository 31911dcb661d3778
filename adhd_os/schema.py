"""Core data schema for dashboard entities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

LEVELS = ("low", "medium", "high")
BLOCK_TYPES = ("task", "break", "buffer", "focus", "meeting")
STRATEGY_CATEGORIES = ("breathing", "grounding", "cognitive", "physical")
MOODS = ("accomplished", "frustrated", "energized", "calm", "overwhelmed", "neutral")
INSIGHT_TYPES = ("pattern", "improvement", "achievement")


@dataclass(frozen=True)
class TimeBlock:
    """A scheduled interval on the weekly planner grid."""

    id: str
    title: str
    start_time: str
    end_time: str
    date: str
    type: str = "task"
    priority: str = "medium"
    energy_required: str = "medium"
    description: str = ""


@dataclass(frozen=True)
class Task:
    """A to-do item shown on the dashboard."""

    id: str
    title: str
    priority: str
    estimated_minutes: int
    energy_required: str = "medium"
    completed: bool = False
    actual_minutes: Optional[int] = None
    description: Optional[str] = None
    category: Optional[str] = None


@dataclass(frozen=True)
class CopingStrategy:
    id: str
    name: str
    description: str
    effectiveness: int
    time_required: int
    category: str


@dataclass(frozen=True)
class AnxietyLog:
    """A recorded anxiety event and how it was handled."""

    id: str
    trigger: str
    anxiety_level: int
    coping_strategy: str
    outcome: str
    priority_maintained: bool
    timestamp: datetime


@dataclass(frozen=True)
class DailyReflection:
    id: str
    date: str
    energy_level: int
    focus_quality: int
    anxiety_level: int
    accomplishments: str
    challenges: str
    improvements: str
    mood: str = "neutral"


@dataclass(frozen=True)
class ProductivityInsight:
    id: str
    title: str
    description: str
    type: str
    impact: str
    actionable: bool


@dataclass(frozen=True)
class WeeklyStats:
    """Precomputed weekly progress figures for the dashboard."""

    tasks_completed: int
    total_tasks: int
    accurate_estimates: int
    total_estimates: int
    focus_time: float
    target_focus_time: float


@dataclass(frozen=True)
class ReflectionWeeklyStats:
    average_energy: float
    average_focus: float
    average_anxiety: float
    tasks_completed: int
    estimation_accuracy: int
    focus_hours: float
    distraction_events: int
