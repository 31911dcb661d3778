import json
from dataclasses import replace

import pytest

from adhd_os import seed
from adhd_os.adapters.csv_adapter import parse as parse_csv
from adhd_os.adapters.json_adapter import JsonFileRepository, parse as parse_json, seed_file


def test_csv_parse_success(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text(
        "id,title,description,priority,estimated_minutes,actual_minutes,completed,energy_required,category\n"
        "1,Review proposal,,high,45,,false,high,work\n"
        "2,Standup,Daily sync,medium,30,25,true,low,\n",
        encoding="utf-8",
    )
    tasks = parse_csv(str(path))
    assert len(tasks) == 2
    assert tasks[0].actual_minutes is None
    assert tasks[0].description is None
    assert tasks[1].completed
    assert tasks[1].actual_minutes == 25
    assert tasks[1].category is None


def test_csv_parse_invalid_row(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text("id,title,estimated_minutes,priority\n1,Review,soon,high\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Row 2"):
        parse_csv(str(path))


def test_csv_parse_rejects_unknown_priority(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text("id,title,estimated_minutes,priority\n1,Review,30,urgent\n", encoding="utf-8")
    with pytest.raises(ValueError, match="invalid priority"):
        parse_csv(str(path))


def test_json_parse_success(tmp_path):
    path = tmp_path / "seed.json"
    payload = {
        "time_blocks": [
            {"id": "1", "title": "Planning", "start_time": "09:00", "end_time": "09:30", "date": "2025-07-18"},
        ],
        "anxiety_logs": [
            {"id": "1", "trigger": "Email", "anxiety_level": 8, "timestamp": "2025-07-18T09:00:00"},
        ],
    }
    path.write_text(json.dumps(payload), encoding="utf-8")

    collections = parse_json(str(path))

    assert set(collections) == {"time_blocks", "anxiety_logs"}
    assert collections["time_blocks"][0].type == "task"
    assert collections["time_blocks"][0].priority == "medium"
    assert collections["anxiety_logs"][0].anxiety_level == 8


@pytest.mark.parametrize(
    "item",
    [
        {"id": "1", "title": "Planning", "start_time": "9am", "end_time": "10:00", "date": "2025-07-18"},
        {"id": "1", "title": "Planning", "start_time": "09:00", "end_time": "10:00", "date": "18/07/2025"},
        {"id": "1", "title": "Planning", "start_time": "09:00", "end_time": "10:00", "date": "2025-07-18", "type": "nap"},
        {"id": "1", "start_time": "09:00", "end_time": "10:00", "date": "2025-07-18"},
    ],
)
def test_json_parse_malformed_block(tmp_path, item):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"time_blocks": [item]}), encoding="utf-8")
    with pytest.raises(ValueError, match="Item 1"):
        parse_json(str(path))


@pytest.mark.parametrize(
    "collection,item",
    [
        ("tasks", {"id": "1", "title": "Review", "estimated_minutes": 30, "completed": "false"}),
        ("anxiety_logs", {"id": "1", "trigger": "Email", "anxiety_level": 6, "timestamp": "2025-07-18T09:00:00", "priority_maintained": 1}),
    ],
)
def test_json_parse_rejects_non_boolean_flags(tmp_path, collection, item):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({collection: [item]}), encoding="utf-8")
    with pytest.raises(ValueError, match="Item 1: .* must be true or false"):
        parse_json(str(path))


def test_json_parse_reads_boolean_flags(tmp_path):
    path = tmp_path / "seed.json"
    tasks = [
        {"id": "1", "title": "Review", "estimated_minutes": 30, "completed": False},
        {"id": "2", "title": "Email", "estimated_minutes": 15, "completed": True},
        {"id": "3", "title": "Plan", "estimated_minutes": 10},
    ]
    path.write_text(json.dumps({"tasks": tasks}), encoding="utf-8")
    assert [task.completed for task in parse_json(str(path))["tasks"]] == [False, True, False]


def test_json_parse_rejects_unknown_collection(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"habits": []}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))


def test_json_file_repository(tmp_path):
    repo = JsonFileRepository(tmp_path / "data" / "anxiety_logs.json", "anxiety_logs")
    assert repo.list() == []

    logs = seed.seed_anxiety_logs()
    assert repo.initialize(logs)
    assert not repo.initialize([])
    assert repo.list() == logs

    with pytest.raises(ValueError):
        repo.create(logs[0])
    with pytest.raises(KeyError):
        repo.update(replace(logs[0], id="missing"))


def test_json_file_repository_update(tmp_path):
    repo = JsonFileRepository(tmp_path / "tasks.json", "tasks")
    tasks = seed.seed_tasks()
    repo.initialize(tasks)

    repo.update(replace(tasks[0], completed=True))
    assert repo.list()[0].completed
    assert repo.list()[1:] == tasks[1:]


def test_seed_file_is_readable(tmp_path):
    path = tmp_path / "seed.json"
    seed_file(path, {"time_blocks": seed.seed_time_blocks(), "reflections": seed.seed_reflections()})
    collections = parse_json(str(path))
    assert [block.title for block in collections["time_blocks"]] == ["Morning Planning", "Project Review", "Break"]
    assert len(collections["reflections"]) == 2
