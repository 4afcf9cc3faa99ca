import io

import pytest

from santaworkshop.databases import ChildrenDatabase, LetterDatabase
from santaworkshop.models import Children, Gift, Letter, Wishlist
from santaworkshop.ui import Console, ElfUI, LetterUI, MainUI


def make_console(text):
    return Console(io.StringIO(text), io.StringIO())


def output(console):
    return console.stdout.getvalue()


@pytest.fixture
def dbs(tmp_path):
    children = ChildrenDatabase(tmp_path / "children.txt")
    letters = LetterDatabase(tmp_path / "letters.txt", children=children)
    return children, letters


def store_child(children, letters, name="Ana", surname="Pop", good=True, gifts=("Doll",)):
    city = "Gaborone,Botswana"
    children.insert(Children(name, surname, city, 7, is_good=good))
    letters.add(
        Letter(
            name=name,
            surname=surname,
            city=city,
            age=7,
            color="Pink",
            wishlist=Wishlist(name, surname, [Gift(g, 10) for g in gifts]),
        )
    )


def make_elf(console, dbs):
    children, letters = dbs
    return ElfUI(console, letters=letters, children=children, in_stock=lambda gift: True)


def test_console_reads_tokens_across_lines():
    console = make_console("alpha beta\n\n  42\n")
    assert console.read() == "alpha"
    assert console.read() == "beta"
    assert console.read_int() == 42
    with pytest.raises(EOFError):
        console.read()


def test_console_read_int_rejects_words():
    console = make_console("word\n")
    with pytest.raises(ValueError):
        console.read_int()


def test_console_write_goes_to_stdout():
    console = make_console("")
    console.write("hello")
    assert output(console) == "hello"


def test_choose_country_retries_until_one():
    console = make_console("2\n1\n")
    assert LetterUI(console).choose_country() == 1
    assert "Only one city available. Type 1:" in output(console)


def test_choose_city_returns_destination_name():
    console = make_console("1 9 3\n")
    assert LetterUI(console).choose_city() == "Molepolole,Botswana"
    assert "Invalid city number.Pick one between 1-5" in output(console)


def test_read_child():
    console = make_console("Ana Pop 7 1 2 good\n")
    child = LetterUI(console).read_child()
    assert child == Children("Ana", "Pop", "Francistown,Botswana", 7, is_good=True)


def test_read_child_bad_status():
    console = make_console("Ana Pop 7 1 1 bad\n")
    assert LetterUI(console).read_child().is_good is False


def test_read_wishlist_collects_store_gifts():
    console = make_console("4 -1 1 0\n")
    child = Children("Ana", "Pop", "Gaborone,Botswana", 7)
    wishlist = LetterUI(console).read_wishlist(child)
    assert [gift.name for gift in wishlist.gifts] == ["Doll", "Remote_Car_Control"]
    assert wishlist.full_name == "Ana Pop"


def test_read_wishlist_rejects_out_of_range():
    console = make_console("20 4 0\n")
    wishlist = LetterUI(console).read_wishlist(Children("Ana", "Pop"))
    assert [gift.name for gift in wishlist.gifts] == ["Doll"]
    assert "Type a number between 0 and 15" in output(console)


def test_read_letter_keeps_child_and_wishlist():
    console = make_console("Pink\n")
    child = Children("Ana", "Pop", "Gaborone,Botswana", 7)
    wishlist = Wishlist("Ana", "Pop", [Gift("Doll", 10)])
    letter = LetterUI(console).read_letter(child, wishlist)
    assert letter.color == "Pink"
    assert letter.wishlist == wishlist
    assert (letter.name, letter.city, letter.age) == ("Ana", "Gaborone,Botswana", 7)


def test_insert_new_child_stores_both(dbs):
    children, letters = dbs
    console = make_console("Ana Pop 7 1 1 good 4 0 Blue\n")
    assert make_elf(console, dbs).insert_new_child() is True
    assert [c.full_name for c in children.all()] == ["Ana Pop"]
    stored = letters.all()
    assert [g.name for g in stored[0].wishlist.gifts] == ["Doll"]
    assert stored[0].color == "Blue"


def test_insert_new_child_rejects_wrong_color(dbs):
    children, letters = dbs
    console = make_console("Ana Pop 7 1 1 good 4 0 Green\n")
    assert make_elf(console, dbs).insert_new_child() is False
    assert letters.all() == []
    assert children.all() == []
    assert "Problem inserting children or letter:" in output(console)


def test_show_all_letters_empty(dbs):
    console = make_console("")
    make_elf(console, dbs).show_all_letters()
    assert output(console) == "Insert at least one child:\n"


def test_show_all_letters_lists_letters(dbs):
    store_child(*dbs)
    console = make_console("")
    make_elf(console, dbs).show_all_letters()
    text = output(console)
    assert "* Child name and surname: Ana Pop" in text
    assert "\t - Doll\n" in text
    assert "* Letter color: Pink" in text


def test_show_final_result_empty(dbs):
    console = make_console("")
    make_elf(console, dbs).show_final_result()
    assert output(console) == "Insert a children first:\n"


def test_show_final_result_report(dbs):
    store_child(*dbs)
    console = make_console("")
    make_elf(console, dbs).show_final_result()
    text = output(console)
    assert " * Ana Pop\n\t- Doll\n" in text
    assert "- Girls:  1" in text
    assert "Candy number: 90" in text
    assert "Total distance: " in text
    assert text.count("Start from: Rovaniemi") == 4


def test_show_final_result_bad_child_gets_coal(dbs):
    store_child(*dbs, good=False)
    console = make_console("")
    make_elf(console, dbs).show_final_result()
    text = output(console)
    assert "- Coal" in text
    assert "A surprise from trolls: 0.5$" in text


def test_child_cities(dbs):
    store_child(*dbs)
    console = make_console("")
    assert make_elf(console, dbs).child_cities() == [("Ana Pop", "Gaborone,Botswana")]


def test_main_menu_read_me_and_exit(dbs):
    console = make_console("4 0\n")
    MainUI(console, make_elf(console, dbs)).run()
    text = output(console)
    assert "Welcome to Santa's workshop:" in text
    assert "\t-Option 0: Close the program:\n" in text


def test_main_menu_rejects_unknown_option(dbs):
    console = make_console("9\n")
    MainUI(console, make_elf(console, dbs)).run()
    assert "Pick a digit between 0-4:" in output(console)


def test_delete_letter_removes_it(dbs):
    children, letters = dbs
    store_child(children, letters)
    store_child(children, letters, name="Ion", surname="Lup")
    console = make_console("1\n")
    ui = MainUI(console, make_elf(console, dbs))
    assert ui.delete_letter() is True
    assert [l.full_name for l in letters.all()] == ["Ion Lup"]
    assert [c.full_name for c in children.all()] == ["Ion Lup"]


def test_delete_letter_wrong_id(dbs):
    store_child(*dbs)
    console = make_console("5\n")
    ui = MainUI(console, make_elf(console, dbs))
    assert ui.delete_letter() is False
    assert "Wrong letter Id:" in output(console)
    assert len(dbs[1].all()) == 1