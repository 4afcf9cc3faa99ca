"""Flat-file storage for children and their letters."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from pathlib import Path

from .models import Children, Gift, Letter, Wishlist
from .store import CHILDREN_DB_NAME, LETTER_DB_NAME, store_list, tokenize

LETTER_COLORS = frozenset({"Pink", "pink", "Blue", "blue"})


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError:
        return []


def _append_line(path: Path, line: str) -> None:
    with path.open("a", encoding="utf-8") as handle:
        handle.write(line + "\n")


def _first_by_id(records: Iterator[tuple[int, object]]) -> dict:
    entries: dict = {}
    for record_id, item in records:
        entries.setdefault(record_id, item)
    return entries


class ChildrenDatabase:
    """Children stored one per line as: id name surname age city good."""

    def __init__(self, path: str | PathLike[str] = CHILDREN_DB_NAME) -> None:
        self.path = Path(path)

    def _records(self) -> Iterator[tuple[int, Children]]:
        for line in _read_lines(self.path):
            tokens = tokenize(line, " ")
            if not tokens:
                continue
            child = Children(
                name=tokens[1],
                surname=tokens[2],
                age=int(tokens[3]),
                city=tokens[4],
                is_good=bool(int(tokens[5])),
            )
            yield int(tokens[0]), child

    def insert(self, child: Children) -> None:
        """Append a child, numbered after the lines already stored."""
        count = len(_read_lines(self.path))
        _append_line(
            self.path,
            f"{count} {child.name} {child.surname} {child.age} "
            f"{child.city} {int(child.is_good)}",
        )

    def delete(self, child_id: int) -> None:
        """Remove the child with the given id and renumber the rest."""
        entries = _first_by_id(self._records())
        self.path.write_text("", encoding="utf-8")
        for record_id in sorted(entries):
            if record_id != child_id:
                self.insert(entries[record_id])

    def all(self) -> list[Children]:
        """Every stored child, in file order."""
        return [child for _, child in self._records()]

    def problems(self, child: Children) -> list[str]:
        """Reasons the child cannot be stored; empty when it is valid."""
        found = []
        if not child.name:
            found.append("Child name problems:")
        if not child.surname:
            found.append("Child surname problems:")
        if not child.city:
            found.append("Child city problems:")
        if child.age <= 0:
            found.append("Child age problems:")
        return found

    def is_good(self, name: str, surname: str) -> bool:
        """Whether the first stored child with this name was good."""
        for line in _read_lines(self.path):
            tokens = tokenize(line, " ")
            if len(tokens) < 6 or tokens[1] != name or tokens[2] != surname:
                continue
            flag = int(tokens[5])
            if flag == 1:
                return True
            if flag == 0:
                return False
        raise KeyError(f"{name} {surname}")


class LetterDatabase:
    """Letters stored one per line as: id name surname age city color gifts..."""

    def __init__(
        self,
        path: str | PathLike[str] = LETTER_DB_NAME,
        children: ChildrenDatabase | None = None,
    ) -> None:
        self.path = Path(path)
        self.children = children if children is not None else ChildrenDatabase()

    def _records(self) -> Iterator[tuple[int, Letter]]:
        prices = {gift.name: gift.price for gift in store_list()}
        for line in _read_lines(self.path):
            tokens = tokenize(line, " ")
            if not tokens:
                continue
            name, surname = tokens[1], tokens[2]
            gifts = [Gift(gift_name, prices.get(gift_name, 0.0)) for gift_name in tokens[6:]]
            letter = Letter(
                name=name,
                surname=surname,
                age=int(tokens[3]),
                city=tokens[4],
                color=tokens[5],
                wishlist=Wishlist(name, surname, gifts),
            )
            yield int(tokens[0]), letter

    def add(self, letter: Letter) -> None:
        """Append a letter, numbered after the lines already stored."""
        count = len(_read_lines(self.path))
        gifts = "".join(f"{gift.name} " for gift in letter.wishlist.gifts)
        _append_line(
            self.path,
            f"{count} {letter.name} {letter.surname} {letter.age} "
            f"{letter.city} {letter.color} {gifts}",
        )

    def delete(self, letter_id: int) -> None:
        """Remove the letter with this id, and the child with the same id."""
        entries = _first_by_id(self._records())
        self.path.write_text("", encoding="utf-8")
        for record_id in sorted(entries):
            if record_id != letter_id:
                self.add(entries[record_id])
        self.children.delete(letter_id)

    def all(self) -> list[Letter]:
        """Every stored letter, in file order, with prices from the store."""
        return [letter for _, letter in self._records()]

    def problems(self, letter: Letter) -> list[str]:
        """Reasons the letter cannot be stored; empty when it is valid."""
        found = []
        if not letter.name:
            found.append("Letter with wrong name")
        if not letter.surname:
            found.append("Letter with wrong surname")
        if not letter.wishlist.gifts:
            found.append("Letter with empty wish list")
        if letter.age <= 0:
            found.append("Letter with wrong age")
        if letter.color not in LETTER_COLORS:
            found.append("Letter with wrong color")
        return found