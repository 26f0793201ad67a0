"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from pathlib import Path

import pytest

from vitalife.config import Settings
from vitalife.containers import AppContainer, build_container
from vitalife.domain.models import UserProfile
from vitalife.services.store import KeyValueStorage, TrackerStore

FIXED_NOW = datetime(2026, 10, 19, 9, 30, tzinfo=UTC)


@dataclass
class InMemoryStorage(KeyValueStorage):
    """In-memory key-value storage that records writes."""

    items: dict[str, str] = field(default_factory=dict)
    writes: list[str] = field(default_factory=list)

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.items[key] = value
        self.writes.append(key)

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


@dataclass
class SequentialIds:
    """Deterministic id factory yielding ``"1"``, ``"2"``, ..."""

    issued: int = 0

    def __call__(self) -> str:
        self.issued += 1
        return str(self.issued)


def fixed_clock() -> datetime:
    return FIXED_NOW


def make_profile(**overrides: object) -> UserProfile:
    values: dict[str, object] = {
        "name": "Alex",
        "age": 27,
        "gender": "male",
        "height": 180.0,
        "start_weight": 90.0,
        "current_weight": 86.0,
        "goal_weight": 78.0,
        "goal_duration": 6,
        "activity_level": "moderate",
        "start_date": "2026-10-01T08:00:00+00:00",
    }
    values.update(overrides)
    return UserProfile(**values)  # type: ignore[arg-type]


@pytest.fixture
def storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(storage: InMemoryStorage) -> TrackerStore:
    return TrackerStore.load(storage, id_factory=SequentialIds())


@pytest.fixture
def profile() -> UserProfile:
    return make_profile()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(storage_path=tmp_path / "storage.json")


@pytest.fixture
def container(settings: Settings, storage: InMemoryStorage) -> AppContainer:
    return build_container(settings, storage=storage)
