"""Products sold in the mall's stores."""

from __future__ import annotations

import itertools
from abc import ABC, abstractmethod

_FOOD_VAT = 0.09
_STANDARD_VAT = 0.19
_PET_DEPOSIT = 0.5


class Product(ABC):
    """A product with a name, base price and stock quantity."""

    _ids = itertools.count(1)

    def __init__(self, name: str, price: float, quantity: int) -> None:
        self.id = next(Product._ids)
        self.name = name
        self.price = price
        self.quantity = quantity

    @abstractmethod
    def unit_price(self) -> float:
        """Price of one unit, taxes included."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id}, name={self.name!r}, price={self.price})"


class Drink(Product):
    """A drink; PET bottles carry a deposit on top of the reduced VAT."""

    def __init__(
        self,
        name: str,
        price: float,
        quantity: int,
        alcohol_percentage: float,
        grams: int,
        is_pet: bool,
    ) -> None:
        super().__init__(name, price, quantity)
        self.alcohol_percentage = alcohol_percentage
        self.grams = grams
        self.is_pet = is_pet

    def unit_price(self) -> float:
        return self.price + self.price * _FOOD_VAT + self.is_pet * _PET_DEPOSIT


class Gadget(Product):
    """An electronic device."""

    def __init__(
        self,
        name: str,
        price: float,
        quantity: int,
        battery: int,
        memory: int,
        warranty: int,
    ) -> None:
        super().__init__(name, price, quantity)
        self.battery = battery
        self.memory = memory
        self.warranty = warranty

    def unit_price(self) -> float:
        return self.price + self.price * _STANDARD_VAT


class Clothing(Product):
    """A piece of clothing."""

    def __init__(
        self,
        name: str,
        price: float,
        quantity: int,
        gender: str,
        size: str,
        material: str,
    ) -> None:
        super().__init__(name, price, quantity)
        self.gender = gender
        self.size = size
        self.material = material

    def unit_price(self) -> float:
        return self.price + self.price * _STANDARD_VAT


class Food(Product):
    """A food item with its ingredients and allergens."""

    def __init__(
        self,
        name: str,
        price: float,
        quantity: int,
        grams: int,
        ingredients: list[str],
        allergens: list[str],
    ) -> None:
        super().__init__(name, price, quantity)
        self.grams = grams
        self.ingredients = list(ingredients)
        self.allergens = list(allergens)

    def unit_price(self) -> float:
        return self.price + self.price * _FOOD_VAT