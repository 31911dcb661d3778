from datetime import date, datetime

import pytest

from adhd_os import reflection, seed


def test_mood_emoji_falls_back_to_neutral():
    assert reflection.mood_emoji("accomplished") == "🎯"
    assert reflection.mood_emoji("neutral") == "😐"
    assert reflection.mood_emoji("bored") == "😐"


def test_insight_color():
    assert reflection.insight_color("achievement", "high") == "green"
    assert reflection.insight_color("pattern", "high") == "red"
    assert reflection.insight_color("improvement", "medium") == "yellow"
    assert reflection.insight_color("pattern", "low") == "blue"


def test_summarize_seed_reflections():
    summary = reflection.summarize(seed.seed_reflections())
    assert summary == {
        "average_energy": 7.0,
        "average_focus": 6.0,
        "average_anxiety": 4.5,
        "days": 2,
    }


def test_summarize_empty():
    assert reflection.summarize([])["days"] == 0


def test_build_reflection_uses_today():
    draft = reflection.ReflectionDraft(accomplishments="Shipped it", mood="energized")
    record = reflection.build_reflection(draft, today=date(2025, 7, 18), now=datetime(2025, 7, 18, 21, 0))

    assert record.date == "2025-07-18"
    assert (record.energy_level, record.focus_quality, record.anxiety_level) == (7, 6, 4)
    assert record.mood == "energized"


def test_build_reflection_rejects_unknown_mood():
    with pytest.raises(ValueError):
        reflection.build_reflection(reflection.ReflectionDraft(mood="bored"))
