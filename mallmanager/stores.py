"""Stores located in the mall."""

from __future__ import annotations

import itertools

from .products import Clothing, Food, Gadget


class Store:
    """A store on a floor of the mall; every store gets a unique id."""

    _ids = itertools.count(1)

    def __init__(self, name: str, floor: int, is_open: bool) -> None:
        self.id = next(Store._ids)
        self.name = name
        self.floor = floor
        self.is_open = is_open

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id}, name={self.name!r}, "
            f"floor={self.floor}, is_open={self.is_open})"
        )


class ElectronicsStore(Store):
    """A store selling gadgets."""

    def __init__(self, name: str, floor: int, is_open: bool) -> None:
        super().__init__(name, floor, is_open)
        self.gadget_catalog: list[Gadget] = []


class ClothingStore(Store):
    """A store selling clothes."""

    def __init__(self, name: str, floor: int, is_open: bool) -> None:
        super().__init__(name, floor, is_open)
        self.clothing_catalog: list[Clothing] = []


class FoodStore(Store):
    """A store selling food; being on the menu does not mean being in stock."""

    def __init__(self, name: str, floor: int, is_open: bool) -> None:
        super().__init__(name, floor, is_open)
        self.food_catalog: list[Food] = []


class Hypermarket(ElectronicsStore, ClothingStore, FoodStore):
    """A store selling gadgets, clothes and food alike."""

    def __init__(self, name: str, floor: int, is_open: bool) -> None:
        super().__init__(name, floor, is_open)