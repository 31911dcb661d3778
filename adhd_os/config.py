"""Runtime settings, logging set-up and store wiring."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from adhd_os import seed
from adhd_os.adapters import csv_adapter, json_adapter
from adhd_os.repository import InMemoryRepository
from adhd_os.store import Store

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


@dataclass(frozen=True)
class Settings:
    log_level: str = "INFO"
    data_dir: Optional[Path] = None
    seed_file: Optional[Path] = None
    auth_provider: Optional[str] = None
    default_energy: int = 75


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from exc


def _env_path(environ: Mapping[str, str], name: str) -> Optional[Path]:
    raw = environ.get(name, "").strip()
    return Path(raw).expanduser() if raw else None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read settings from ``ADHD_OS_*`` environment variables."""

    environ = os.environ if environ is None else environ
    energy = _env_int(environ, "ADHD_OS_DEFAULT_ENERGY", 75)
    return Settings(
        log_level=environ.get("ADHD_OS_LOG_LEVEL", "INFO").strip().upper() or "INFO",
        data_dir=_env_path(environ, "ADHD_OS_DATA_DIR"),
        seed_file=_env_path(environ, "ADHD_OS_SEED_FILE"),
        auth_provider=environ.get("ADHD_OS_AUTH_PROVIDER", "").strip() or None,
        default_energy=max(0, min(100, energy)),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def load_seed(path: Path) -> dict[str, list]:
    """Load seed collections from a ``.json`` document or a ``.csv`` task list."""

    suffix = path.suffix.lower()
    if suffix == ".json":
        return json_adapter.parse(str(path))
    if suffix == ".csv":
        return {"tasks": csv_adapter.parse(str(path))}
    raise ValueError("Unsupported seed format, expected .csv or .json")


def _default_collections() -> dict[str, list]:
    return {
        "tasks": seed.seed_tasks(),
        "time_blocks": seed.seed_time_blocks(),
        "anxiety_logs": seed.seed_anxiety_logs(),
        "reflections": seed.seed_reflections(),
    }


def build_store(settings: Settings) -> Store:
    """Create the application store from settings.

    With a data directory every collection lives in ``<data_dir>/<name>.json``;
    a collection file that does not exist yet is initialised from the seed.
    Without one the store is in-memory and discarded with the session.
    """

    collections = _default_collections()
    if settings.seed_file is not None:
        collections.update(load_seed(settings.seed_file))

    if settings.data_dir is None:
        logger.info("Using in-memory repositories")
        return Store(*(InMemoryRepository(collections[name]) for name in json_adapter.COLLECTIONS))

    repositories = []
    for name in json_adapter.COLLECTIONS:
        repository = json_adapter.JsonFileRepository(settings.data_dir / f"{name}.json", name)
        repository.initialize(collections[name])
        repositories.append(repository)
    logger.info("Using JSON repositories in %s", settings.data_dir)
    return Store(*repositories)
