"""Plain data types used throughout the workshop: gifts, children, letters, cities."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Gift:
    """A gift a child can wish for, with its price in dollars."""

    name: str = ""
    price: float = 0.0
    is_added: bool = False


@dataclass
class Children:
    """A child known to the workshop."""

    name: str = ""
    surname: str = ""
    city: str = ""
    age: int = 0
    is_good: bool = False

    @property
    def full_name(self) -> str:
        return f"{self.name} {self.surname}"


@dataclass
class Wishlist:
    """The ordered list of gifts a child asked for."""

    children_name: str = ""
    children_surname: str = ""
    gifts: list[Gift] = field(default_factory=list)

    @property
    def full_name(self) -> str:
        return f"{self.children_name} {self.children_surname}"

    def add_gift(self, gift: Gift) -> None:
        """Append a gift to the end of the list."""
        self.gifts.append(gift)

    def remove_gift(self) -> Gift:
        """Remove and return the last gift; raises IndexError when empty."""
        if not self.gifts:
            raise IndexError("wishlist is empty")
        return self.gifts.pop()


@dataclass
class Letter(Children):
    """A letter written by a child: the child's data, the paper colour and a wishlist."""

    color: str = ""
    wishlist: Wishlist = field(default_factory=Wishlist)


@dataclass
class City:
    """A destination city and its distance from the starting point in km."""

    name: str
    distance: float