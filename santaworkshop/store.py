"""The gift store, stock checks, default gifts, destination cities and small helpers."""

from __future__ import annotations

import random
from collections.abc import Iterable
from numbers import Number

from .models import City, Gift

LETTER_DB_NAME = "LetterDB.txt"
CHILDREN_DB_NAME = "ChildrenDB.txt"

_STORE = (
    ("Remote_Car_Control", 20.5),
    ("Simple_Car", 10.5),
    ("Truck_Car", 20.5),
    ("Doll", 10),
    ("Lego_Constructor", 30),
    ("Kitchen_set", 30.5),
    ("Lego_Spider", 30.5),
    ("Lamborghini_Remote_Car_Control", 50),
    ("Simple_Toy", 5),
    ("Firefight_car", 6),
    ("Simple_Doll", 7),
    ("Race_Car", 15),
    ("Doll_House", 20),
    ("Phone", 150),
    ("Iphone", 300),
)

_DESTINATIONS = (
    ("Gaborone,Botswana", 10136.37),
    ("Francistown,Botswana", 9748.89),
    ("Molepolole,Botswana", 10108.29),
    ("Mahalapye,Botswana", 9964.13),
    ("Maun,Botswana", 0),
)

_MENU_CITIES = ("Gaborone", "Francistown ", "Molepolole", "Mahalapye", "Maun,Botswana")


def store_list() -> list[Gift]:
    """Every gift the store sells, in catalogue order."""
    return [Gift(name, price) for name, price in _STORE]


def random_bool(rng: random.Random | None = None) -> bool:
    """A fair coin toss."""
    source = rng if rng is not None else random
    return source.random() > 0.5


def gift_stock(rng: random.Random | None = None) -> list[tuple[Gift, bool]]:
    """The catalogue, each gift paired with whether it is currently in stock."""
    return [(gift, random_bool(rng)) for gift in store_list()]


def check_gift_stock(gift: Gift, rng: random.Random | None = None) -> bool:
    """Whether a gift of that name is in stock right now."""
    return any(
        in_stock for stocked, in_stock in gift_stock(rng) if stocked.name == gift.name
    )


def default_gift(amount: int) -> Gift:
    """The fallback gift for a budget of 100 or 10 dollars."""
    if amount == 100:
        return Gift("100 Default Gift", 100)
    if amount == 10:
        return Gift("10 Default Gift", 10)
    raise ValueError(f"no default gift for amount {amount!r}")


def has_entries(value: Number | Iterable) -> bool:
    """True for a non-zero count or a non-empty collection."""
    if isinstance(value, Number):
        return value != 0
    return len(value) > 0  # type: ignore[arg-type]


def tokenize(text: str, delim: str = " ") -> list[str]:
    """Split on a delimiter, dropping empty pieces."""
    return [piece for piece in text.split(delim) if piece]


def sort_by_price_desc(gifts: Iterable[Gift]) -> list[Gift]:
    """Gifts ordered from most to least expensive."""
    return sorted(gifts, key=lambda gift: gift.price, reverse=True)


def destination_cities() -> list[City]:
    """The cities children may live in, with their distance from the start."""
    return [City(name, distance) for name, distance in _DESTINATIONS]


def country_menu() -> str:
    """The country selection menu."""
    return "1. Botswana:\n"


def city_menu() -> str:
    """The numbered city selection menu."""
    return "".join(f"{number}\t{name}\n" for number, name in enumerate(_MENU_CITIES, 1))