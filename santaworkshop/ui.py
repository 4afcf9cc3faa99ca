"""Interactive console front end for the workshop."""

from __future__ import annotations

import random
import sys
from collections import deque
from collections.abc import Callable
from typing import TextIO

from .databases import ChildrenDatabase, LetterDatabase
from .dijkstra import route_report
from .elf import ElfProcess
from .models import Children, Gift, Letter, Wishlist
from .roads import SEPARATOR, mst_report
from .store import city_menu, country_menu, destination_cities, has_entries, store_list

BANNER = "#########################################################\n"
COUNTRY_COUNT = 1


def _num(value: float) -> str:
    """Format a number the way a default stream does: compact, no trailing zeros."""
    return f"{value:g}"


class Console:
    """Whitespace-separated token input and text output."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self._tokens: deque[str] = deque()

    def read(self) -> str:
        """The next token; raises EOFError when the input is exhausted."""
        while not self._tokens:
            line = self.stdin.readline()
            if line == "":
                raise EOFError("end of input")
            self._tokens.extend(line.split())
        return self._tokens.popleft()

    def read_int(self) -> int:
        """The next token as an integer; raises ValueError when it is not one."""
        token = self.read()
        try:
            return int(token)
        except ValueError:
            raise ValueError(f"expected a number, got {token!r}") from None

    def write(self, text: str) -> None:
        self.stdout.write(text)


class LetterUI:
    """Asks for a child's data, wishlist and letter."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()

    def choose_country(self) -> int:
        out = self.console.write
        out("Children city:\n")
        out("Pick a country from the list. Type country's number:\n")
        out(country_menu())
        while True:
            number = self.console.read_int()
            if number == COUNTRY_COUNT:
                return number
            out("Only one city available. Type 1:\n")

    def choose_city(self) -> str:
        self.choose_country()
        cities = destination_cities()
        out = self.console.write
        out(city_menu())
        out("Select a city from the list.Type country's number:\n")
        while True:
            city_id = self.console.read_int()
            if 1 <= city_id <= len(cities):
                return cities[city_id - 1].name
            out("Invalid city number.Pick one between 1-5\n")

    def read_child(self) -> Children:
        out = self.console.write
        out("Children name:\n")
        name = self.console.read()
        out("Children Surname:\n")
        surname = self.console.read()
        out("Children age:\n")
        age = self.console.read_int()
        city = self.choose_city()
        out("Good/bad children:Type bad/good :\n")
        status = self.console.read()
        return Children(name, surname, city, age, is_good=status in ("good", "Good"))

    def read_wishlist(self, child: Children) -> Wishlist:
        out = self.console.write
        catalogue = store_list()
        gifts: list[Gift] = []
        out("Pick gift/gifts\n")
        choice = -1
        while choice != 0:
            out("Pick a gift from the list:\n")
            for number, gift in enumerate(catalogue, 1):
                out(f"{number}\t{gift.name}\t{_num(gift.price)}\n")
            out("Select a gift number to add in your wishList:\n")
            choice = self.console.read_int()
            if choice < 0 or choice > len(catalogue):
                out(f"Type a number between 0 and {len(catalogue)}\n")
            elif choice == 0:
                break
            else:
                gifts.append(catalogue[choice - 1])
                out("Gift added to your wishList:\n")
                out("For add more gift, type -1 \t For exit, type 0:\n")
                choice = self.console.read_int()
        return Wishlist(child.name, child.surname, gifts)

    def read_letter(self, child: Children, wishlist: Wishlist) -> Letter:
        self.console.write("Letter color(Pink/Blue):\n")
        color = self.console.read()
        return Letter(
            name=child.name,
            surname=child.surname,
            city=child.city,
            age=child.age,
            color=color,
            wishlist=wishlist,
        )


class ElfUI:
    """Shows stored letters and the elves' final report."""

    def __init__(
        self,
        console: Console | None = None,
        letters: LetterDatabase | None = None,
        children: ChildrenDatabase | None = None,
        in_stock: Callable[[Gift], bool] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.console = console if console is not None else Console()
        if letters is None:
            letters = LetterDatabase(children=children) if children else LetterDatabase()
        self.letters = letters
        self.children = children if children is not None else letters.children
        self.in_stock = in_stock
        self.rng = rng

    def _process(self) -> ElfProcess:
        process = ElfProcess(self.children, rng=self.rng, in_stock=self.in_stock)
        for letter in self.letters.all():
            process.process_letter(letter)
        return process

    def insert_new_child(self) -> bool:
        """Ask for a new child and letter and store both; False if rejected."""
        letter_ui = LetterUI(self.console)
        child = letter_ui.read_child()
        wishlist = letter_ui.read_wishlist(child)
        letter = letter_ui.read_letter(child, wishlist)

        child_problems = self.children.problems(child)
        for problem in child_problems:
            self.console.write(problem + "\n\n")
        letter_problems = [] if child_problems else self.letters.problems(letter)
        for problem in letter_problems:
            self.console.write(problem)
        if child_problems or letter_problems:
            self.console.write("Problem inserting children or letter:\n\n")
            return False
        self.children.insert(child)
        self.letters.add(letter)
        return True

    def show_all_letters(self) -> None:
        letters = self.letters.all()
        out = self.console.write
        if not has_entries(len(letters)):
            out("Insert at least one child:\n")
            return
        out("\t 1. Children's letters:\n")
        for number, letter in enumerate(letters, 1):
            out(f"-------------Letter #{number}------------------------\n")
            out(f"* Child name and surname: {letter.name} {letter.surname}\n")
            out(f"* Child age: {letter.age}\n")
            out(f"* Child city: {letter.city}\n")
            out("* Child wishList:\n")
            for gift in letter.wishlist.gifts:
                out(f"\t - {gift.name}\n")
            out(f"* Letter color: {letter.color}\n")
            out("\n")

    def _roads(self) -> str:
        try:
            second = route_report(self.children.all())
        except ValueError as error:
            second = str(error)
        return f"{mst_report()}\n\n{second}\n"

    def show_final_result(self) -> None:
        out = self.console.write
        if not has_entries(self.letters.all()):
            out("Insert a children first:\n")
            return
        process = self._process()
        costs = process.compute_total_costs()
        data = process.data

        out(BANNER)
        out("\t2. Elf's Children final list:\n")
        for wishlist in data.wishlists:
            out(f" * {wishlist.children_name} {wishlist.children_surname}\n")
            out("\t" + "\t".join(f"- {gift.name}\n" for gift in wishlist.gifts))

        out("\n")
        out(BANNER)
        out("\t3. Troll's color packed:\n")
        out(f"- Girls:  {data.girl_packs}\n")
        out(f"- Boys:  {data.boy_packs}\n")
        out("\n")
        out("\tLady Christmas's Candy number list:\n")
        for name, candies in data.candy_numbers:
            out(f" - Child name: {name}\tCandy number: {candies}\n")

        out("\n")
        out(BANNER)
        out("\t4. Lady Christmas final's math:\n")
        for count, wishlist in enumerate(data.wishlists, 1):
            gift_total, candies = costs[wishlist.full_name]
            has_coal = any(gift.name == "Coal" for gift in wishlist.gifts)
            if not has_coal:
                out(f"{count}. {wishlist.children_name} {wishlist.children_surname}:\n")
                out(f"\tGift total price: {_num(gift_total)} $\n")
                out(f"\tCandy total price: {candies} $\n")
                out(SEPARATOR + "\n")
                out(f"\tTotal:  {_num(gift_total + candies)} $\n")
            else:
                out(f"{count} . {wishlist.children_name} {wishlist.children_surname}\n")
                out(f"\tGift total price: {_num(gift_total)} $\n")
                out(f"\tCandy total price: {candies} $\n")
                out("\tA surprise from trolls: 0.5$\n")
                out(SEPARATOR + "\n")
                out(f"\tTotal:  {_num(gift_total + candies + 0.5)} $ \n")

        roads = self._roads()
        out("\n")
        out(BANNER)
        out("\t5. Santa's travel roads:\n")
        out(roads)
        out("\n")
        out(BANNER)
        out("\t6. Sharing with Lady Santa travel roads:\n")
        out(roads)

    def child_cities(self) -> list[tuple[str, str]]:
        """Each child's full name with the city they live in."""
        return list(self._process().data.cities)


class MainUI:
    """The main menu loop."""

    def __init__(self, console: Console | None = None, elf_ui: ElfUI | None = None) -> None:
        self.console = console if console is not None else Console()
        self.elf_ui = elf_ui if elf_ui is not None else ElfUI(self.console)

    def run(self) -> None:
        out = self.console.write
        out("Welcome to Santa's workshop:\n")
        out("-----------------------------------------\n")
        out("Choose one option by typing the number:\n")
        self.show_options()
        actions = {
            1: self.elf_ui.insert_new_child,
            2: self.elf_ui.show_all_letters,
            3: self.elf_ui.show_final_result,
            4: self.read_me,
            5: self._show_and_delete,
        }
        while True:
            try:
                choice = self.console.read_int()
            except EOFError:
                return
            except ValueError:
                choice = -1
            if choice == 0:
                return
            action = actions.get(choice)
            if action is None:
                out("Pick a digit between 0-4:\n\n")
                continue
            action()
            self.show_options()

    def _show_and_delete(self) -> None:
        self.elf_ui.show_all_letters()
        self.delete_letter()

    def show_options(self) -> None:
        out = self.console.write
        out("1. Insert new child and letter:\n")
        out("2. Check Letter Database:\n")
        out("3. Creates the final Santa's report based on children you inserted:\n")
        out("4. Read me:\n")
        out("5. Delete letter:\n")
        out("0. Exit program:\n")
        out("Pick an option:\n")

    def read_me(self) -> None:
        out = self.console.write
        out("\t-Option 1: Insert a new children with letter in Santa's database:\n")
        out("\t-Option 2: See all letters which are in the database:\n")
        out("\t-Option 3: Based on database letters, create Santa's request:\n")
        out("\t-Option 5: Delete a letter from Santa's database:\n")
        out("\t-Option 0: Close the program:\n")

    def delete_letter(self) -> bool:
        """Ask for a letter number and delete it; False when the number is wrong."""
        letters = self.elf_ui.letters
        count = len(letters.all())
        self.console.write("Type letter ID in order to delete:\n")
        letter_id = self.console.read_int()
        if letter_id < 1 or letter_id > count:
            self.console.write("Wrong letter Id:\n")
            return False
        letters.delete(letter_id - 1)
        self.console.write("Letter deleted:\n")
        return True


def main(argv: list[str] | None = None) -> int:
    """Start the interactive workshop menu."""
    MainUI(Console()).run()
    return 0