"""The elves' processing of letters into final gift lists, candies and costs."""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass, field

from .databases import ChildrenDatabase
from .models import Gift, Letter, Wishlist
from .store import check_gift_stock, default_gift, sort_by_price_desc

GOOD_BUDGET = 100
BAD_BUDGET = 10
COAL = ("Coal", 0.5)


@dataclass
class ElfData:
    """Everything the elves worked out for the letters processed so far."""

    wishlists: list[Wishlist] = field(default_factory=list)
    candy_numbers: list[tuple[str, int]] = field(default_factory=list)
    cities: list[tuple[str, str]] = field(default_factory=list)
    costs: dict[str, tuple[float, int]] = field(default_factory=dict)
    girl_packs: int = 0
    boy_packs: int = 0


class ElfProcess:
    """Turns letters into final gift lists within each child's budget."""

    def __init__(
        self,
        children: ChildrenDatabase | None = None,
        rng: random.Random | None = None,
        in_stock: Callable[[Gift], bool] | None = None,
    ) -> None:
        self.children = children if children is not None else ChildrenDatabase()
        self.in_stock = in_stock or (lambda gift: check_gift_stock(gift, rng))
        self.data = ElfData()

    def process_letter(self, letter: Letter) -> None:
        """Choose the gifts, candies and coal for one letter and record them."""
        good = self.children.is_good(letter.name, letter.surname)
        budget = GOOD_BUDGET if good else BAD_BUDGET
        wished = letter.wishlist.gifts
        if not wished:
            raise ValueError("letter has an empty wishlist")

        chosen: list[Gift] = []
        spent = 0.0
        if sort_by_price_desc(wished)[0].price > budget:
            chosen.append(default_gift(budget))
            spent = budget
        else:
            for gift in wished:
                if spent + gift.price <= budget and self.in_stock(gift):
                    spent += gift.price
                    chosen.append(gift)
        if not chosen:
            chosen.append(default_gift(budget))
            spent = budget

        candies = int(budget - spent)
        full_name = letter.full_name
        if not good:
            chosen.append(Gift(*COAL))
        if letter.color in ("pink", "Pink"):
            self.data.girl_packs += 1
        if letter.color in ("blue", "Blue"):
            self.data.boy_packs += 1
        self.data.wishlists.append(Wishlist(letter.name, letter.surname, chosen))
        self.data.candy_numbers.append((full_name, candies))
        self.data.cities.append((full_name, letter.city))

    def compute_total_costs(self) -> dict[str, tuple[float, int]]:
        """Gift total and candy count per child, keyed by full name."""
        costs: dict[str, tuple[float, int]] = {}
        for wishlist in self.data.wishlists:
            gift_total = sum(gift.price for gift in wishlist.gifts)
            candies = next(
                (count for name, count in self.data.candy_numbers if name == wishlist.full_name),
                0,
            )
            costs.setdefault(wishlist.full_name, (gift_total, candies))
        self.data.costs = costs
        return costs