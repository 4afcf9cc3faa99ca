import random

import pytest

from santaworkshop.models import Gift
from santaworkshop.store import (
    check_gift_stock,
    city_menu,
    country_menu,
    default_gift,
    destination_cities,
    gift_stock,
    has_entries,
    random_bool,
    sort_by_price_desc,
    store_list,
    tokenize,
)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_store_list_pins_catalogue_ends():
    gifts = store_list()
    assert gifts[0] == Gift("Remote_Car_Control", 20.5)
    assert gifts[-1] == Gift("Iphone", 300)
    assert len({gift.name for gift in gifts}) == len(gifts)


def test_gift_stock_covers_catalogue_in_order():
    stock = gift_stock(random.Random(1))
    assert [gift for gift, _ in stock] == store_list()


def test_random_bool_follows_rng():
    assert random_bool(_FixedRng(0.9)) is True
    assert random_bool(_FixedRng(0.1)) is False


def test_check_gift_stock_depends_on_stock():
    assert check_gift_stock(Gift("Doll", 10), _FixedRng(0.9)) is True
    assert check_gift_stock(Gift("Doll", 10), _FixedRng(0.1)) is False


def test_check_gift_stock_unknown_gift_never_stocked():
    assert check_gift_stock(Gift("Spaceship", 1), _FixedRng(0.9)) is False


def test_default_gifts():
    assert default_gift(100) == Gift("100 Default Gift", 100)
    assert default_gift(10) == Gift("10 Default Gift", 10)


def test_default_gift_rejects_other_amounts():
    with pytest.raises(ValueError):
        default_gift(50)


def test_has_entries():
    assert has_entries(0) is False
    assert has_entries(3) is True
    assert has_entries([]) is False
    assert has_entries(["letter"]) is True


def test_tokenize_skips_repeated_delimiters():
    assert tokenize("  0 Ana  Pop 7 ") == ["0", "Ana", "Pop", "7"]
    assert tokenize("a,b,,c", ",") == ["a", "b", "c"]
    assert tokenize("   ") == []


def test_sort_by_price_desc_is_ordered_permutation():
    gifts = store_list()
    ordered = sort_by_price_desc(gifts)
    prices = [gift.price for gift in ordered]
    assert prices == sorted(prices, reverse=True)
    assert sorted(g.name for g in ordered) == sorted(g.name for g in gifts)
    assert ordered[0].name == "Iphone"


def test_destination_cities():
    cities = destination_cities()
    assert cities[0].name == "Gaborone,Botswana"
    assert cities[-1].name == "Maun,Botswana"
    assert cities[-1].distance == 0


def test_menus():
    assert country_menu() == "1. Botswana:\n"
    lines = city_menu().splitlines()
    assert lines[0] == "1\tGaborone"
    assert lines[1] == "2\tFrancistown "
    assert lines[-1].endswith("Maun,Botswana")