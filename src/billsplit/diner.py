"""A single participant on the bill"""
from decimal import Decimal
from typing import List, Tuple
from uuid import uuid4

from .class_models import DinerBreakdown, MenuItem, to_decimal, to_percentage
from .exceptions import InvalidDinerCount

HUNDRED = Decimal(100)


class Diner:
    """
    A diner with their own tip percentage and the personal items assigned to them.

    Personal items are appended by BillSplitter when an item is assigned; the
    diner never removes them.
    """

    def __init__(self, name: str, tip_percentage=0):
        self.name = name
        self.tip_percentage = to_percentage(tip_percentage)
        self.diner_id = uuid4().hex
        self._personal_items: List[MenuItem] = []

    def __repr__(self) -> str:
        return f"Diner(name={self.name!r}, tip_percentage={self.tip_percentage}, items={len(self._personal_items)})"

    @property
    def personal_items(self) -> Tuple[MenuItem, ...]:
        return tuple(self._personal_items)

    @property
    def personal_total(self) -> Decimal:
        return sum((item.price for item in self._personal_items), Decimal(0))

    def _add_personal_item(self, item: MenuItem) -> None:
        self._personal_items.append(item)

    def breakdown(
        self,
        shared_items_cost,
        service_charge_percentage,
        total_diner_count: int
    ) -> DinerBreakdown:
        """
        Work out this diner's share of the bill

        Args:
            shared_items_cost: Combined price of every shared item on the bill
            service_charge_percentage: Service charge applied to the subtotal
            total_diner_count: Number of diners the shared cost is split between

        Returns:
            DinerBreakdown with the subtotal, service charge, tip and total

        Raises:
            InvalidDinerCount: if total_diner_count is not positive
        """
        if total_diner_count <= 0:
            raise InvalidDinerCount(
                f"Shared costs need at least one diner, got {total_diner_count}"
            )

        personal_total = self.personal_total
        shared_allocation = to_decimal(shared_items_cost) / total_diner_count

        subtotal = personal_total + shared_allocation
        service_charge = subtotal * to_percentage(service_charge_percentage) / HUNDRED
        tip = subtotal * self.tip_percentage / HUNDRED

        return DinerBreakdown(
            personal_total=personal_total,
            shared_allocation=shared_allocation,
            subtotal=subtotal,
            service_charge=service_charge,
            tip=tip,
            total=subtotal + service_charge + tip,
        )

    def calculate_total(
        self,
        shared_items_cost,
        service_charge_percentage,
        total_diner_count: int
    ) -> Decimal:
        return self.breakdown(shared_items_cost, service_charge_percentage, total_diner_count).total
