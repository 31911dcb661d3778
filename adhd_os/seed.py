"""Built-in seed collections used when no seed file is configured."""

from __future__ import annotations

from datetime import datetime, timedelta

from adhd_os.schema import (
    AnxietyLog,
    CopingStrategy,
    DailyReflection,
    ProductivityInsight,
    ReflectionWeeklyStats,
    Task,
    TimeBlock,
    WeeklyStats,
)

WEEKLY_STATS = WeeklyStats(
    tasks_completed=12,
    total_tasks=18,
    accurate_estimates=8,
    total_estimates=12,
    focus_time=24.5,
    target_focus_time=30,
)

REFLECTION_WEEKLY_STATS = ReflectionWeeklyStats(
    average_energy=7.2,
    average_focus=6.8,
    average_anxiety=4.1,
    tasks_completed=24,
    estimation_accuracy=78,
    focus_hours=32.5,
    distraction_events=12,
)


def seed_tasks() -> list[Task]:
    return [
        Task("1", "Review project proposal", "high", 45, energy_required="high", category="work"),
        Task("2", "Team standup meeting", "medium", 30, energy_required="low", completed=True, actual_minutes=25, category="meetings"),
        Task("3", "Write documentation", "medium", 90, energy_required="medium", category="work"),
        Task("4", "Code review", "low", 20, energy_required="medium", category="work"),
    ]


def seed_time_blocks() -> list[TimeBlock]:
    return [
        TimeBlock("1", "Morning Planning", "09:00", "09:30", "2025-07-18", "focus", "high", "high"),
        TimeBlock("2", "Project Review", "10:00", "11:30", "2025-07-18", "task", "high", "high"),
        TimeBlock("3", "Break", "11:30", "11:45", "2025-07-18", "break", "low", "low"),
    ]


def coping_strategies() -> list[CopingStrategy]:
    return [
        CopingStrategy("1", "4-7-8 Breathing", "Inhale for 4, hold for 7, exhale for 8", 85, 2, "breathing"),
        CopingStrategy(
            "2",
            "5-4-3-2-1 Grounding",
            "5 things you see, 4 you hear, 3 you touch, 2 you smell, 1 you taste",
            78,
            3,
            "grounding",
        ),
        CopingStrategy("3", "Priority Anchor", "Remind yourself of your top 3 priorities for today", 72, 1, "cognitive"),
        CopingStrategy("4", "Quick Walk", "Take a 5-minute walk to reset your mind", 80, 5, "physical"),
    ]


def seed_anxiety_logs(now: datetime | None = None) -> list[AnxietyLog]:
    now = now or datetime.now()
    return [
        AnxietyLog(
            "1",
            "Unexpected meeting request",
            7,
            "4-7-8 Breathing",
            "Managed to reschedule and maintain focus",
            True,
            now - timedelta(hours=2),
        ),
        AnxietyLog(
            "2",
            "Email about urgent deadline",
            8,
            "Priority Anchor",
            "Clarified actual urgency, not as critical as thought",
            True,
            now - timedelta(hours=24),
        ),
    ]


def seed_reflections() -> list[DailyReflection]:
    return [
        DailyReflection(
            "1",
            "2025-07-17",
            8,
            7,
            3,
            "Completed project proposal, had productive team meeting",
            "Got distracted by emails in the afternoon",
            "Need to batch email checking to specific times",
            "accomplished",
        ),
        DailyReflection(
            "2",
            "2025-07-16",
            6,
            5,
            6,
            "Finished code review, started documentation",
            "Unexpected urgent request disrupted my flow",
            "Better communication about priorities with team",
            "frustrated",
        ),
    ]


def productivity_insights() -> list[ProductivityInsight]:
    return [
        ProductivityInsight(
            "1",
            "Morning Energy Peak",
            "Your energy levels are consistently highest between 9-11 AM. "
            "Schedule your most important tasks during this window.",
            "pattern",
            "high",
            True,
        ),
        ProductivityInsight(
            "2",
            "Email Distraction Pattern",
            "You've mentioned email distractions 4 times this week. "
            "Consider batching email checks to 3 specific times per day.",
            "improvement",
            "medium",
            True,
        ),
        ProductivityInsight(
            "3",
            "Estimation Accuracy Improving",
            "Your time estimation accuracy has improved from 65% to 78% over the past two weeks. Great progress!",
            "achievement",
            "high",
            False,
        ),
        ProductivityInsight(
            "4",
            "Anxiety Triggers",
            "Unexpected requests are your primary anxiety trigger. "
            "Building buffer time into your schedule could help.",
            "pattern",
            "medium",
            True,
        ),
    ]
