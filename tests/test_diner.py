from decimal import Decimal

import pytest

from billsplit import BillSplitterError, Diner, InvalidDinerCount, InvalidPercentage, MenuItem


def make_diner(tip, *prices):
    diner = Diner("Alice", tip)
    for price in prices:
        diner._add_personal_item(MenuItem("item", price))
    return diner


@pytest.mark.parametrize(
    "shared, service, tip, count",
    [
        ("20", "10", "20", 2),
        ("30", "10", "15", 3),
        ("0", "12.5", "0", 4),
        ("100", "0", "150", 5),
    ],
)
def test_total_without_personal_items_is_shared_share_plus_charges(shared, service, tip, count):
    diner = Diner("Bob", tip)
    shared, service, tip = Decimal(shared), Decimal(service), Decimal(tip)

    expected = (shared / count) * (1 + service / 100 + tip / 100)
    assert diner.calculate_total(shared, service, count) == expected


def test_total_with_personal_items():
    diner = make_diner(10, 5)
    assert diner.calculate_total(Decimal(20), Decimal(10), 2) == Decimal("18")


def test_breakdown_exposes_every_step():
    breakdown = make_diner(10, 5).breakdown(20, 10, 2)

    assert breakdown.personal_total == Decimal(5)
    assert breakdown.shared_allocation == Decimal(10)
    assert breakdown.subtotal == Decimal(15)
    assert breakdown.service_charge == Decimal("1.5")
    assert breakdown.tip == Decimal("1.5")
    assert breakdown.total == Decimal(18)


def test_personal_total_does_not_depend_on_order():
    prices = ["1.10", "2.25", "7", "0.65"]
    forwards = make_diner(0, *prices)
    backwards = make_diner(0, *reversed(prices))
    assert forwards.personal_total == backwards.personal_total == Decimal("11.00")


def test_personal_total_is_zero_without_items():
    assert Diner("Bob").personal_total == 0


@pytest.mark.parametrize("count", [0, -1])
def test_non_positive_diner_count_is_rejected(count):
    with pytest.raises(InvalidDinerCount):
        Diner("Bob", 10).calculate_total(20, 10, count)


def test_calculation_does_not_change_the_diner():
    diner = make_diner(10, 5)
    first = diner.calculate_total(20, 10, 2)
    second = diner.calculate_total(20, 10, 2)
    assert first == second
    assert len(diner.personal_items) == 1


def test_personal_items_are_read_only():
    diner = make_diner(0, 3)
    assert isinstance(diner.personal_items, tuple)


def test_tip_above_one_hundred_percent_is_allowed():
    assert Diner("Big Tipper", 150).calculate_total(10, 0, 1) == Decimal(25)


@pytest.mark.parametrize("tip", ["abc", "NaN", "Infinity", "-Infinity", None])
def test_non_numeric_tip_is_rejected(tip):
    with pytest.raises(InvalidPercentage):
        Diner("Ada", tip)


def test_invalid_tip_is_a_bill_splitter_error():
    with pytest.raises(BillSplitterError):
        Diner("Ada", "abc")


@pytest.mark.parametrize("service", ["abc", "NaN"])
def test_non_numeric_service_charge_is_rejected_when_calculating(service):
    with pytest.raises(InvalidPercentage):
        Diner("Ada", 10).calculate_total(20, service, 2)
