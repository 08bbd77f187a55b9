# mallmanager

A small model of a shopping mall, with a text menu for adding stores to it.

## What it contains

- `mallmanager.people`: `Person` and its kinds. Every person gets a unique,
  increasing `id`. `Employee` has a `salary`, which starts at `0.0`. Its kinds are
  `Cook` (`dishes`, `years_experience`, `daily_portions`), `Cashier`
  (`register_number`, `threshold`, `monthly_sales` as a list of `MonthlySales`,
  `bonus`), `Manager` (`team` of employee ids, `company_car`,
  `team_sales_target`) and `Security` (`shift`, `armed`). A `Client` has
  `credit`, which defaults to `0`, and a `subscription`. The subscription is a
  copy of the `Subscription` passed in, or an empty one with discount 0.
- `mallmanager.products`: the abstract `Product` (`id`, `name`, `price`,
  `quantity`) and its kinds. Each kind computes `unit_price()` as follows:
  - `Food`: price plus 9% tax;
  - `Drink`: price plus 9% tax, plus 0.5 when `is_pet` is true;
  - `Gadget` and `Clothing`: price plus 19% tax.
- `mallmanager.stores`: `Store` (`id`, `name`, `floor`, `is_open`) and its kinds:
  - `ElectronicsStore`, with a `gadget_catalog`;
  - `ClothingStore`, with a `clothing_catalog`;
  - `FoodStore`, with a `food_catalog`;
  - `Hypermarket`, which has all three catalogues.
- `mallmanager.mall`: `Mall`. `add_store(store)` adds a store. `stores` returns
  them as a tuple, in the order they were added, and `len(mall)` counts them.
- `mallmanager.ui`: the text menus `show_main_menu`, `show_store_menu`,
  `store_menu`, `run_ui` and `main`.

## Installation

```
pip install .
```

## Interactive menu

```
mallmanager
```

The menus are in Romanian. They read one answer per line from standard input.

- **Main menu:**
  - `1` opens the store menu;
  - `2`, `3` and `4` show the main menu again;
  - `0` prints "Optiune invalida!" and exits;
  - any other input prints "Optiune invalida!".
- **Store menu:**
  - `1` adds a store. It asks for the name, the floor, whether the store is open
    (`0`/`1`) and the kind of store. Choosing a kind from `1` to `4` adds a
    `FoodStore` with the details given, whichever of the four kinds was chosen.
    Choosing `0` as the kind returns to the main menu.
  - Any other option shows the store menu again.

Either menu also ends when input runs out.

## Library use

```python
from mallmanager.mall import Mall
from mallmanager.stores import FoodStore
from mallmanager.products import Food

mall = Mall()
mall.add_store(FoodStore("Bistro", 1, True))

soup = Food("Soup", 10.0, 5, 300, ["water", "vegetables"], ["celery"])
print(soup.unit_price())  # 10.0 plus 9% tax
```

You can also drive the menus from code by passing any text streams:

```python
import io
from mallmanager.mall import Mall
from mallmanager.ui import run_ui

mall = Mall()
out = io.StringIO()
run_ui(mall, io.StringIO("1\n1\nBistro\n2\n1\n1\n"), out)
print(len(mall))  # 1
```

## What it does not do

- The menus cannot remove stores.
- The menus cannot manage employees, clients or products.
- Nothing is saved: the mall exists only while the program runs.
- Store catalogues, cashier sales and bonuses are plain lists and values. Nothing
  fills them in or computes them.

## Running the tests

```
pip install .[test]
pytest
```