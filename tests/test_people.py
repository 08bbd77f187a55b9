import pytest

from mallmanager.people import (
    Cashier,
    Client,
    Cook,
    Manager,
    MonthlySales,
    Security,
    Subscription,
)


def test_ids_are_unique_and_increasing_across_kinds():
    a = Client("Pop", "Ana", 30, "ana@example.com")
    b = Cook("Ion", "Vlad", 40, "vlad@example.com", ["supa"], 5, 100)
    c = Security("Dan", "Mihai", 35, "mihai@example.com", "noapte", False)
    assert a.id < b.id < c.id
    assert len({a.id, b.id, c.id}) == 3


def test_client_defaults():
    client = Client("Pop", "Ana", 30, "ana@example.com")
    assert client.credit == 0
    assert client.subscription == Subscription("", 0)
    assert client.first_name == "Ana"
    assert client.last_name == "Pop"


def test_client_subscription_is_copied():
    sub = Subscription("Gold", 15)
    client = Client("Pop", "Ana", 30, "ana@example.com", credit=50.0, subscription=sub)
    sub.discount = 99
    assert client.subscription.discount == 15
    assert client.subscription.name == "Gold"
    assert client.credit == 50.0


def test_cook_keeps_own_copy_of_dishes():
    dishes = ["ciorba", "sarmale"]
    cook = Cook("Ion", "Vlad", 40, "vlad@example.com", dishes, 5, 100)
    dishes.append("mici")
    assert cook.dishes == ["ciorba", "sarmale"]
    assert cook.years_experience == 5
    assert cook.daily_portions == 100


def test_cashier_starts_with_no_sales_and_no_bonus():
    cashier = Cashier("Radu", "Ema", 25, "ema@example.com", 3, 1000)
    assert cashier.monthly_sales == []
    assert cashier.bonus == 0
    assert cashier.register_number == 3
    assert cashier.threshold == 1000
    assert cashier.salary == 0.0
    cashier.monthly_sales.append(MonthlySales(1, 2024, 500.0))
    assert cashier.monthly_sales[0].total_sales == 500.0


@pytest.mark.parametrize("car", [True, False])
def test_manager_fields(car):
    manager = Manager("Stan", "Ilie", 50, "ilie@example.com", [1, 2], car, 10000.0)
    assert manager.team == [1, 2]
    assert manager.company_car is car
    assert manager.team_sales_target == 10000.0


def test_security_fields():
    guard = Security("Dan", "Mihai", 35, "mihai@example.com", "zi", True)
    assert guard.shift == "zi"
    assert guard.armed is True
    assert guard.email == "mihai@example.com"
    assert guard.age == 35