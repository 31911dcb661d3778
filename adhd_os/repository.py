"""Repository interface and the in-memory implementation."""

from __future__ import annotations

from typing import Generic, Iterable, Protocol, TypeVar

T = TypeVar("T")


class Repository(Protocol[T]):
    """Minimal persistence boundary for one entity type, keyed by ``id``."""

    def list(self) -> list[T]: ...

    def create(self, item: T) -> T: ...

    def update(self, item: T) -> T: ...


class InMemoryRepository(Generic[T]):
    """Keeps entities in insertion order for the lifetime of the process."""

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: dict[str, T] = {}
        for item in items:
            self.create(item)

    def list(self) -> list[T]:
        return list(self._items.values())

    def create(self, item: T) -> T:
        key = item.id
        if key in self._items:
            raise ValueError(f"duplicate id '{key}'")
        self._items[key] = item
        return item

    def update(self, item: T) -> T:
        key = item.id
        if key not in self._items:
            raise KeyError(key)
        self._items[key] = item
        return item
