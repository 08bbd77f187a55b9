"""People in the mall: clients and the different kinds of employees."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field


@dataclass
class Subscription:
    """A client subscription granting a percentage discount."""

    name: str = ""
    discount: int = 0


@dataclass
class MonthlySales:
    """Total sales recorded for one month of one year."""

    month: int
    year: int
    total_sales: float


class Person:
    """Someone known to the mall; every person gets a unique, increasing id."""

    _ids = itertools.count(1)

    def __init__(self, last_name: str, first_name: str, age: int, email: str) -> None:
        self.id = next(Person._ids)
        self.last_name = last_name
        self.first_name = first_name
        self.age = age
        self.email = email

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(id={self.id}, last_name={self.last_name!r}, "
            f"first_name={self.first_name!r})"
        )


class Employee(Person):
    """A person working in the mall."""

    def __init__(self, last_name: str, first_name: str, age: int, email: str) -> None:
        super().__init__(last_name, first_name, age, email)
        self.salary = 0.0


class Cook(Employee):
    """An employee who cooks; more experience means better pay."""

    def __init__(
        self,
        last_name: str,
        first_name: str,
        age: int,
        email: str,
        dishes: list[str],
        years_experience: int,
        daily_portions: int,
    ) -> None:
        super().__init__(last_name, first_name, age, email)
        self.dishes = list(dishes)
        self.years_experience = years_experience
        self.daily_portions = daily_portions


class Cashier(Employee):
    """A cashier at a register; sales above the threshold earn a bonus."""

    def __init__(
        self,
        last_name: str,
        first_name: str,
        age: int,
        email: str,
        register_number: int,
        threshold: int,
    ) -> None:
        super().__init__(last_name, first_name, age, email)
        self.register_number = register_number
        self.threshold = threshold
        self.monthly_sales: list[MonthlySales] = []
        self.bonus = 0


class Manager(Employee):
    """A manager leading a team identified by employee ids."""

    def __init__(
        self,
        last_name: str,
        first_name: str,
        age: int,
        email: str,
        team: list[int],
        company_car: bool,
        team_sales_target: float,
    ) -> None:
        super().__init__(last_name, first_name, age, email)
        self.team = list(team)
        self.company_car = company_car
        self.team_sales_target = team_sales_target


class Security(Employee):
    """A security guard working a given shift."""

    def __init__(
        self,
        last_name: str,
        first_name: str,
        age: int,
        email: str,
        shift: str,
        armed: bool,
    ) -> None:
        super().__init__(last_name, first_name, age, email)
        self.shift = shift
        self.armed = armed


class Client(Person):
    """A shopper with store credit and an optional subscription."""

    def __init__(
        self,
        last_name: str,
        first_name: str,
        age: int,
        email: str,
        credit: float = 0,
        subscription: Subscription | None = None,
    ) -> None:
        super().__init__(last_name, first_name, age, email)
        self.credit = credit
        self.subscription = (
            Subscription()
            if subscription is None
            else Subscription(subscription.name, subscription.discount)
        )


__all__ = [
    "Subscription",
    "MonthlySales",
    "Person",
    "Employee",
    "Cook",
    "Cashier",
    "Manager",
    "Security",
    "Client",
]


# keep dataclass import used for type clarity
_ = field