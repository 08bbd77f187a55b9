"""Text menus for managing the mall."""

from __future__ import annotations

import sys
from typing import TextIO

from .mall import Mall
from .stores import FoodStore

_MAIN_MENU = (
    "Bine ai venit in sistemul de gestiune al mall-ului! Ce ai dori sa faci?",
    "1.Gestioneaza Magazinele",
    "2.Gestioneaza Angajatii",
    "3.Gestioneaza Clientii",
    "4.Gestioneaza Produsele",
    "0.Iesi din program",
)

_STORE_MENU = (
    "Ce ai dori sa gestionezi in privinta magazinelor?",
    "1.Adauga un magazin",
    "2.Sterge un magazin",
)

_STORE_KINDS = (
    "Ce fel de magazin este?",
    "1.Magazin de Mancare",
    "2.Magazin de Haine",
    "3.Magazin de Electronice",
    "4.Hipermaket",
    "0.Inapoi",
)


def _print_lines(lines: tuple[str, ...], stdout: TextIO) -> None:
    for line in lines:
        print(line, file=stdout)


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if not line:
        raise EOFError
    return line.rstrip("\n")


def _read_int(stdin: TextIO) -> int:
    """Read an integer from the next line; unreadable input counts as -1."""
    text = _read_line(stdin).strip()
    try:
        return int(text.split()[0]) if text else -1
    except ValueError:
        return -1


def show_main_menu(stdout: TextIO) -> None:
    """Print the main menu."""
    _print_lines(_MAIN_MENU, stdout)


def show_store_menu(stdout: TextIO) -> None:
    """Print the store management menu."""
    _print_lines(_STORE_MENU, stdout)


def store_menu(mall: Mall, stdin: TextIO, stdout: TextIO) -> None:
    """Run the store management menu until the user goes back or input ends."""
    try:
        while True:
            show_store_menu(stdout)
            if _read_int(stdin) != 1:
                continue
            print("Numele magazinului:", file=stdout)
            name = _read_line(stdin)
            print("La ce etaj se afla magazinul?", file=stdout)
            floor = _read_int(stdin)
            print("E deschis magazinul? 0/1", file=stdout)
            is_open = _read_int(stdin) != 0
            _print_lines(_STORE_KINDS, stdout)
            kind = _read_int(stdin)
            if kind in (1, 2, 3, 4):
                mall.add_store(FoodStore(name, floor, is_open))
            elif kind == 0:
                return
            else:
                print("Varianta invalida!", file=stdout)
    except EOFError:
        return


def run_ui(mall: Mall, stdin: TextIO, stdout: TextIO) -> None:
    """Run the main menu until the user exits or input ends."""
    try:
        while True:
            show_main_menu(stdout)
            option = _read_int(stdin)
            if option == 1:
                store_menu(mall, stdin, stdout)
            elif option in (2, 3, 4):
                continue
            else:
                print("Optiune invalida!", file=stdout)
                if option == 0:
                    return
    except EOFError:
        return


def main(argv: list[str] | None = None) -> int:
    """Start the mall management menus on standard input and output."""
    mall = Mall()
    run_ui(mall, sys.stdin, sys.stdout)
    return 0