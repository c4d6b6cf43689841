import pytest

from billsplit import BillSplitter, Diner, MenuItem


@pytest.fixture
def dinner():
    """10% service charge, shared $20 pizza, $5 soda for Alice, Bob tips 20%."""
    splitter = BillSplitter(10)
    splitter.add_menu_item(MenuItem("Pizza", 20, True))
    splitter.add_menu_item(MenuItem("Soda", 5, False))
    splitter.add_diner(Diner("Alice", 10))
    splitter.add_diner(Diner("Bob", 20))
    return splitter
