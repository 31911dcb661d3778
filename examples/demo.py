"""Demo script for adhd-personal-os."""

import sys
from dataclasses import replace
from datetime import date, datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from adhd_os import anxiety, estimates, planner
from adhd_os.config import build_store, load_settings
from adhd_os.store import Store


def main() -> None:
    store: Store = build_store(load_settings())

    form = planner.select_slot(planner.PlannerForm(), "2025-07-18", 14)
    form = replace(form, draft=replace(form.draft, title="Deep work", end_time="16:30", type="focus"))
    blocks, _ = planner.submit_block(list(store.state.time_blocks), form, now=datetime.now())
    store.replace_time_blocks(blocks)

    grid = planner.build_week_grid(list(store.state.time_blocks), date(2025, 7, 18))
    print(grid.heading)
    for day in grid.days:
        for cell in day.cells:
            if not cell.is_empty:
                print(f"  {day.label} {cell.label}: {', '.join(block.title for block in cell.blocks)}")

    for task in store.state.tasks:
        print(task.title, "->", estimates.accuracy_label(task) or "no actual time yet")

    for level in (5, 6):
        print(f"Anxiety level {level}: prompt={anxiety.should_prompt_coping(level)}")


if __name__ == "__main__":
    main()
