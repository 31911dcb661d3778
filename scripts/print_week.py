"""Print the planner grid for one week as JSON."""

from __future__ import annotations

import argparse
import json
import sys
from dataclasses import replace
from datetime import date
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from adhd_os import planner
from adhd_os.config import build_store, configure_logging, load_settings


def _grid_report(blocks: list, reference: str) -> dict:
    grid = planner.build_week_grid(blocks, reference)
    return {
        "heading": grid.heading,
        "dates": list(grid.dates),
        "days": [
            {
                "label": day.label,
                "date": day.date,
                "slots": {
                    cell.label: [block.title for block in cell.blocks] for cell in day.cells if not cell.is_empty
                },
            }
            for day in grid.days
        ],
    }


def main() -> None:
    parser = argparse.ArgumentParser(description="Print the weekly planner grid")
    parser.add_argument("--week", default=date.today().isoformat(), help="Any date inside the week (YYYY-MM-DD)")
    parser.add_argument("--seed", help="Path to a CSV/JSON seed file")
    args = parser.parse_args()

    settings = load_settings()
    configure_logging(settings.log_level)
    if args.seed:
        settings = replace(settings, seed_file=Path(args.seed))

    store = build_store(settings)
    report = _grid_report(list(store.state.time_blocks), args.week)
    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
