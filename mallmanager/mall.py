"""The mall, holding its stores."""

from __future__ import annotations

from .stores import Store


class Mall:
    """A mall and the stores in it, in the order they were added."""

    def __init__(self) -> None:
        self._stores: list[Store] = []

    @property
    def stores(self) -> tuple[Store, ...]:
        """The stores of the mall."""
        return tuple(self._stores)

    def add_store(self, store: Store) -> None:
        """Add a store to the mall."""
        self._stores.append(store)

    def __len__(self) -> int:
        return len(self._stores)