from decimal import Decimal

import pytest

from billsplit import BillSplitter
from billsplit.console import ConsoleShell


class ScriptedConsole:
    """Feeds canned answers to the shell and records prompts and output."""

    def __init__(self, answers):
        self.answers = iter(answers)
        self.prompts = []
        self.output = []

    def input(self, prompt):
        self.prompts.append(prompt)
        try:
            return next(self.answers)
        except StopIteration:
            raise EOFError

    def print(self, text=""):
        self.output.append(text)

    def shell(self):
        return ConsoleShell(input_func=self.input, output_func=self.print)

    @property
    def text(self):
        return "\n".join(self.output)


def test_full_session():
    console = ScriptedConsole([
        "10",
        "Pizza", "20", "y",
        "Soda", "5", "n",
        "",
        "Alice", "10",
        "Bob", "20",
        "",
        "Carol", "Alice",
    ])

    assert console.shell().run() == 0

    assert "Error: Diner 'Carol' not found. Try again." in console.output
    assert "\nAssigning: Soda ($5.00)" in console.output
    assert "Available diners: Alice, Bob" in console.output
    totals = console.text.split("TOTALS\n", 1)[1]
    assert totals.splitlines() == ["Alice: $18.00", "Bob: $13.00"]


def test_decimal_prompt_retries_until_valid():
    console = ScriptedConsole(["abc", "-5", "NaN", " 7.25 "])

    assert console.shell().prompt_non_negative_decimal("Price: ") == Decimal("7.25")
    assert console.prompts == ["Price: "] + ["Invalid input. Please enter a positive number: "] * 3


def test_item_loop_stops_on_blank_name():
    console = ScriptedConsole(["Chips", "3", "Y", "Dip", "2", "no", "   "])
    splitter = BillSplitter()

    console.shell().collect_items(splitter)

    assert [(i.name, i.price, i.is_shared) for i in splitter.menu_items] == [
        ("Chips", Decimal(3), True),
        ("Dip", Decimal(2), False),
    ]


def test_diner_loop_stops_on_blank_name():
    console = ScriptedConsole(["Ada", "15", ""])
    splitter = BillSplitter()

    console.shell().collect_diners(splitter)

    assert [(d.name, d.tip_percentage) for d in splitter.diners] == [("Ada", Decimal(15))]


def test_session_without_diners_reports_error():
    console = ScriptedConsole(["10", "Pizza", "20", "y", "", ""])

    assert console.shell().run() == 1
    assert console.output[-1] == "Error: Cannot split the bill without any diners"


def test_session_aborted_by_end_of_input():
    console = ScriptedConsole(["10", "Pizza"])

    assert console.shell().run() == 1
    assert console.output[-1] == "\nAborted."


@pytest.mark.parametrize("answer", ["", "n", "yes"])
def test_only_y_marks_an_item_shared(answer):
    console = ScriptedConsole(["Bread", "2", answer, ""])
    splitter = BillSplitter()

    console.shell().collect_items(splitter)

    assert splitter.menu_items[0].is_shared is False
