import json
import logging
from pathlib import Path

import pytest

from adhd_os.config import Settings, build_store, configure_logging, load_seed, load_settings


def test_load_settings_defaults():
    settings = load_settings({})
    assert settings == Settings()


def test_load_settings_from_environment(tmp_path):
    settings = load_settings(
        {
            "ADHD_OS_LOG_LEVEL": "debug",
            "ADHD_OS_DATA_DIR": str(tmp_path),
            "ADHD_OS_AUTH_PROVIDER": "google",
            "ADHD_OS_DEFAULT_ENERGY": "140",
        }
    )
    assert settings.log_level == "DEBUG"
    assert settings.data_dir == tmp_path
    assert settings.auth_provider == "google"
    assert settings.default_energy == 100


def test_load_settings_rejects_bad_integer():
    with pytest.raises(ValueError, match="ADHD_OS_DEFAULT_ENERGY"):
        load_settings({"ADHD_OS_DEFAULT_ENERGY": "lots"})


def test_configure_logging_accepts_unknown_level():
    configure_logging("NOT_A_LEVEL")
    assert logging.getLogger("adhd_os").getEffectiveLevel() <= logging.WARNING


def test_build_store_in_memory_uses_builtin_seed():
    store = build_store(Settings())
    assert len(store.state.tasks) == 4
    assert len(store.state.time_blocks) == 3


def test_build_store_with_csv_seed_replaces_tasks_only(tmp_path):
    path = tmp_path / "tasks.csv"
    path.write_text("id,title,estimated_minutes\na,Inbox zero,15\n", encoding="utf-8")

    store = build_store(Settings(seed_file=path))

    assert [task.title for task in store.state.tasks] == ["Inbox zero"]
    assert len(store.state.time_blocks) == 3


def test_build_store_with_partial_json_seed_keeps_other_collections(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"time_blocks": []}), encoding="utf-8")

    store = build_store(Settings(seed_file=path))

    assert store.state.time_blocks == ()
    assert len(store.state.tasks) == 4
    assert len(store.state.reflections) == 2


def test_build_store_with_data_dir_persists_changes(tmp_path):
    store = build_store(Settings(data_dir=tmp_path))
    store.toggle_complete("1")

    assert (tmp_path / "tasks.json").exists()
    reloaded = build_store(Settings(data_dir=tmp_path))
    assert reloaded.state.tasks[0].completed


def test_load_seed_rejects_unknown_suffix(tmp_path):
    with pytest.raises(ValueError):
        load_seed(Path(tmp_path / "seed.yaml"))


def test_example_seed_files_load():
    examples = Path(__file__).resolve().parents[1] / "examples"
    assert len(load_seed(examples / "tasks.csv")["tasks"]) == 4
    assert len(load_seed(examples / "seed_data.json")["time_blocks"]) == 3
