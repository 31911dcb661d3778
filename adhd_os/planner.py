"""Weekly planner grid layout and time-block placement."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime, timedelta

from adhd_os.schema import TimeBlock

logger = logging.getLogger(__name__)

DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
FIRST_SLOT_HOUR = 8
LAST_SLOT_HOUR = 20
SLOT_HOURS = tuple(range(FIRST_SLOT_HOUR, LAST_SLOT_HOUR + 1))

_PRIORITY_RANK = {"high": 0, "medium": 1, "low": 2}

_TYPE_COLORS = {
    "break": "green",
    "buffer": "gray",
    "focus": "purple",
    "meeting": "blue",
}
_TASK_PRIORITY_COLORS = {"high": "red", "medium": "yellow", "low": "indigo"}


@dataclass(frozen=True)
class SlotCell:
    date: str
    hour: int
    blocks: tuple[TimeBlock, ...] = ()

    @property
    def label(self) -> str:
        return format_hour(self.hour)

    @property
    def is_empty(self) -> bool:
        return not self.blocks


@dataclass(frozen=True)
class DayColumn:
    label: str
    date: str
    is_today: bool
    cells: tuple[SlotCell, ...]


@dataclass(frozen=True)
class WeekGrid:
    dates: tuple[str, ...]
    days: tuple[DayColumn, ...]

    @property
    def heading(self) -> str:
        return week_heading(self.dates)

    def cell(self, day: str, hour: int) -> SlotCell:
        for column in self.days:
            if column.date == day:
                return column.cells[SLOT_HOURS.index(hour)]
        raise KeyError(day)


@dataclass(frozen=True)
class BlockDraft:
    """Field values of the add-block form."""

    title: str = ""
    start_time: str = ""
    end_time: str = ""
    type: str = "task"
    priority: str = "medium"
    energy_required: str = "medium"
    description: str = ""


@dataclass(frozen=True)
class PlannerForm:
    """Local UI state of the add-block dialog."""

    selected_date: str | None = None
    is_open: bool = False
    draft: BlockDraft = field(default_factory=BlockDraft)


def _as_date(reference: date | datetime | str) -> date:
    if isinstance(reference, datetime):
        return reference.date()
    if isinstance(reference, date):
        return reference
    return date.fromisoformat(reference)


def week_dates(reference: date | datetime | str) -> list[str]:
    """Return the Monday..Sunday ISO dates of the week containing ``reference``."""

    day = _as_date(reference)
    start = day - timedelta(days=day.weekday())
    return [(start + timedelta(days=offset)).isoformat() for offset in range(7)]


def format_hour(hour: int) -> str:
    return f"{int(hour):02d}:00"


def time_slots() -> list[str]:
    return [format_hour(hour) for hour in SLOT_HOURS]


def parse_hour(value: str) -> int:
    """Integer hour component of an ``HH:MM`` string; minutes are ignored."""

    return int(value.split(":")[0])


def is_active(block: TimeBlock, day: str, hour: int) -> bool:
    if block.date != day:
        return False
    return parse_hour(block.start_time) <= hour < parse_hour(block.end_time)


def stacking_key(block: TimeBlock) -> tuple[int, str]:
    return (_PRIORITY_RANK.get(block.priority, len(_PRIORITY_RANK)), block.start_time)


def blocks_for_date(blocks: list[TimeBlock], day: str) -> list[TimeBlock]:
    return [block for block in blocks if block.date == day]


def blocks_in_slot(blocks: list[TimeBlock], day: str, hour: int) -> list[TimeBlock]:
    """Blocks active in one grid cell, high priority first, then by start time.

    ``sorted`` is stable, so blocks with equal priority and start time keep
    their insertion order.
    """

    active = [block for block in blocks if is_active(block, day, hour)]
    return sorted(active, key=stacking_key)


def build_week_grid(
    blocks: list[TimeBlock],
    reference: date | datetime | str,
    today: date | None = None,
) -> WeekGrid:
    """Lay out ``blocks`` on the day x hour grid of the week containing ``reference``."""

    dates = week_dates(reference)
    today_iso = (today or date.today()).isoformat()

    days = []
    for label, day in zip(DAY_LABELS, dates):
        day_blocks = blocks_for_date(blocks, day)
        cells = tuple(SlotCell(day, hour, tuple(blocks_in_slot(day_blocks, day, hour))) for hour in SLOT_HOURS)
        days.append(DayColumn(label=label, date=day, is_today=day == today_iso, cells=cells))

    return WeekGrid(dates=tuple(dates), days=tuple(days))


def block_color(block_type: str, priority: str) -> str:
    """Colour name for a block; only task blocks are coloured by priority."""

    if block_type in _TYPE_COLORS:
        return _TYPE_COLORS[block_type]
    return _TASK_PRIORITY_COLORS.get(priority, "gray")


def week_heading(dates: tuple[str, ...] | list[str]) -> str:
    first = date.fromisoformat(dates[0])
    last = date.fromisoformat(dates[-1])
    return f"Week of {first:%B} {first.day} - {last:%B} {last.day}"


def select_slot(form: PlannerForm, day: str, hour: int) -> PlannerForm:
    """Open the add-block form prefilled with the clicked slot's date and hour."""

    draft = replace(form.draft, start_time=format_hour(hour))
    return PlannerForm(selected_date=day, is_open=True, draft=draft)


def close_form(form: PlannerForm) -> PlannerForm:
    return replace(form, is_open=False)


def new_block_id(now: datetime | None = None) -> str:
    moment = now or datetime.now()
    return str(int(moment.timestamp() * 1000))


def submit_block(
    blocks: list[TimeBlock],
    form: PlannerForm,
    now: datetime | None = None,
) -> tuple[list[TimeBlock], PlannerForm]:
    """Append the drafted block, or return the inputs unchanged if a field is missing.

    Neither ``start_time < end_time`` nor overlap with existing blocks is
    checked; a block whose hour range is empty is kept but occupies no slot.
    """

    draft = form.draft
    if not form.selected_date or not draft.title or not draft.start_time or not draft.end_time:
        logger.debug("Ignoring incomplete time block submission for %s", form.selected_date)
        return blocks, form

    block = TimeBlock(
        id=new_block_id(now),
        title=draft.title,
        start_time=draft.start_time,
        end_time=draft.end_time,
        date=form.selected_date,
        type=draft.type,
        priority=draft.priority,
        energy_required=draft.energy_required,
        description=draft.description,
    )
    logger.info("Added time block %s on %s %s-%s", block.title, block.date, block.start_time, block.end_time)
    return [*blocks, block], PlannerForm()
