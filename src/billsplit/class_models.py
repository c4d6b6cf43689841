from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from typing import Any, List
from uuid import uuid4

from pydantic import BaseModel

from .exceptions import InvalidPercentage, InvalidPrice


def _new_id() -> str:
    return uuid4().hex


def to_decimal(value: Any) -> Decimal:
    """Coerce ints, strings and floats to Decimal (floats go through str)."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        value = str(value)
    return Decimal(value)


def to_percentage(value: Any) -> Decimal:
    """Coerce a tip or service charge percentage, rejecting non-numbers, NaN and infinity."""
    try:
        percentage = to_decimal(value)
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidPercentage(f"Percentage must be a number, got {value!r}")
    if not percentage.is_finite():
        raise InvalidPercentage(f"Percentage must be a finite number, got {value!r}")
    return percentage


@dataclass(frozen=True)
class MenuItem:
    """A priced item on the bill, either shared by the table or personal."""
    name: str
    price: Decimal
    is_shared: bool = False
    item_id: str = field(default_factory=_new_id)

    def __post_init__(self):
        try:
            price = to_decimal(self.price)
        except (InvalidOperation, TypeError, ValueError):
            raise InvalidPrice(f"Price must be a number, got {self.price!r}")
        if not price.is_finite():
            raise InvalidPrice(f"Price must be a finite number, got {self.price!r}")
        if price < 0:
            raise InvalidPrice("Price cannot be negative")
        object.__setattr__(self, "price", price)


class DinerBreakdown(BaseModel):
    """Every intermediate figure of one diner's total."""
    personal_total: Decimal
    shared_allocation: Decimal
    subtotal: Decimal
    service_charge: Decimal
    tip: Decimal
    total: Decimal


class DinerTotal(BaseModel):
    diner_id: str
    name: str
    tip_percentage: Decimal
    breakdown: DinerBreakdown

    @property
    def total(self) -> Decimal:
        return self.breakdown.total


class ReportItem(BaseModel):
    name: str
    price: Decimal


class ReportDiner(BaseModel):
    name: str
    tip_percentage: Decimal
    personal_items: List[ReportItem]


class ReportTotal(BaseModel):
    diner_id: str
    name: str
    total: Decimal


class BillReport(BaseModel):
    """Structured bill summary, ready to render or serialize."""
    service_charge_percentage: Decimal
    diners: List[ReportDiner]
    shared_items: List[ReportItem]
    shared_items_total: Decimal
    totals: List[ReportTotal]  # sorted by total, highest first
    grand_total: Decimal
    unassigned_items: List[ReportItem] = []
