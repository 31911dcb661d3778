"""Dashboard shell: tabs, today's focus and weekly progress figures."""

from __future__ import annotations

from datetime import date

from adhd_os.schema import ReflectionWeeklyStats, Task, WeeklyStats

TABS = ("Dashboard", "Planner", "Tracker", "Reflection", "Anxiety")
PLACEHOLDER_TABS = {"Tracker": "Time tracker coming soon..."}


def _pct(value: float, total: float) -> float:
    if total == 0:
        return 0.0
    return value / total * 100.0


def weekly_progress(stats: WeeklyStats) -> list[dict]:
    """Rows for the weekly progress card: label, ``done/total`` text and percent."""

    return [
        {
            "label": "Tasks Completed",
            "text": f"{stats.tasks_completed}/{stats.total_tasks}",
            "percent": _pct(stats.tasks_completed, stats.total_tasks),
        },
        {
            "label": "Estimate Accuracy",
            "text": f"{stats.accurate_estimates}/{stats.total_estimates}",
            "percent": _pct(stats.accurate_estimates, stats.total_estimates),
        },
        {
            "label": "Focus Time",
            "text": f"{stats.focus_time}h/{stats.target_focus_time}h",
            "percent": _pct(stats.focus_time, stats.target_focus_time),
        },
    ]


def reflection_overview(stats: ReflectionWeeklyStats) -> list[dict]:
    # 1-10 scores are shown on a 0-100 bar
    return [
        {"label": "Avg Energy", "value": stats.average_energy, "percent": stats.average_energy * 10},
        {"label": "Avg Focus", "value": stats.average_focus, "percent": stats.average_focus * 10},
        {"label": "Avg Anxiety", "value": stats.average_anxiety, "percent": stats.average_anxiety * 10},
        {"label": "Est. Accuracy", "value": f"{stats.estimation_accuracy}%", "percent": stats.estimation_accuracy},
    ]


def today_heading(today: date, tasks: list[Task] | tuple[Task, ...]) -> str:
    remaining = sum(1 for task in tasks if not task.completed)
    return f"{today:%A, %B} {today.day} • {remaining} tasks remaining"


def clamp_energy(value: int) -> int:
    return max(0, min(100, int(value)))
