"""Bill splitting engine"""
from decimal import Decimal
from typing import Dict, List, Optional
from loguru import logger

from .class_models import DinerTotal, MenuItem, to_percentage
from .diner import Diner
from .exceptions import InvalidDinerCount, ItemAlreadyAssigned, NotFound


class BillSplitter:
    """
    Holds the items and diners of one bill and works out what each diner owes.

    Shared items are pooled and split equally between all diners. Personal
    items are charged in full to the diner they are assigned to. The service
    charge and each diner's tip are applied on top of their subtotal.

    One instance per bill; instances are not safe to mutate from several
    threads at once.
    """

    def __init__(self, service_charge_percentage=0):
        self._service_charge_percentage = to_percentage(service_charge_percentage)
        self._menu_items: List[MenuItem] = []
        self._diners: List[Diner] = []
        self._assignments: Dict[str, str] = {}  # item_id -> diner_id

    @property
    def service_charge_percentage(self) -> Decimal:
        return self._service_charge_percentage

    @property
    def menu_items(self) -> List[MenuItem]:
        return list(self._menu_items)

    @property
    def diners(self) -> List[Diner]:
        return list(self._diners)

    def add_menu_item(self, item: MenuItem) -> MenuItem:
        self._menu_items.append(item)
        logger.debug(f"Added {'shared' if item.is_shared else 'personal'} item {item.name!r} (${item.price})")
        return item

    def add_diner(self, diner: Diner) -> Diner:
        self._diners.append(diner)
        logger.debug(f"Added diner {diner.name!r} with {diner.tip_percentage}% tip")
        return diner

    # Lookups

    def find_item(self, name: str) -> MenuItem:
        """Return the first item called `name`."""
        item = next((i for i in self._menu_items if i.name == name), None)
        if item is None:
            raise NotFound(f"Item '{name}' not found")
        return item

    def find_diner(self, name: str) -> Diner:
        """Return the first diner called `name`."""
        diner = next((d for d in self._diners if d.name == name), None)
        if diner is None:
            raise NotFound(f"Diner '{name}' not found")
        return diner

    def get_item(self, item_id: str) -> MenuItem:
        item = next((i for i in self._menu_items if i.item_id == item_id), None)
        if item is None:
            raise NotFound(f"No item with id {item_id}")
        return item

    def get_diner(self, diner_id: str) -> Diner:
        diner = next((d for d in self._diners if d.diner_id == diner_id), None)
        if diner is None:
            raise NotFound(f"No diner with id {diner_id}")
        return diner

    # Assignment

    def assign_item(self, item_id: str, diner_id: str) -> None:
        """
        Assign a personal item to a diner by id.

        Shared items are never assigned to individuals, so assigning one is a
        no-op. A personal item can only belong to one diner.

        Raises:
            NotFound: if the item or diner id is unknown
            ItemAlreadyAssigned: if the personal item already has a diner
        """
        item = self.get_item(item_id)
        diner = self.get_diner(diner_id)

        if item.is_shared:
            logger.debug(f"Item {item.name!r} is shared, not assigning it to {diner.name!r}")
            return

        owner_id = self._assignments.get(item.item_id)
        if owner_id is not None:
            owner = self.get_diner(owner_id)
            raise ItemAlreadyAssigned(f"Item '{item.name}' is already assigned to {owner.name}")

        diner._add_personal_item(item)
        self._assignments[item.item_id] = diner.diner_id
        logger.debug(f"Assigned {item.name!r} to {diner.name!r}")

    def assign_item_to_diner(self, item_name: str, diner_name: str) -> None:
        """Assign the first item called `item_name` to the first diner called `diner_name`."""
        item = next((i for i in self._menu_items if i.name == item_name), None)
        diner = next((d for d in self._diners if d.name == diner_name), None)
        if item is None or diner is None:
            raise NotFound("Item or diner not found")

        self.assign_item(item.item_id, diner.diner_id)

    def assigned_diner(self, item: MenuItem) -> Optional[Diner]:
        diner_id = self._assignments.get(item.item_id)
        return self.get_diner(diner_id) if diner_id is not None else None

    # Views

    @property
    def shared_items(self) -> List[MenuItem]:
        return [item for item in self._menu_items if item.is_shared]

    @property
    def personal_items(self) -> List[MenuItem]:
        return [item for item in self._menu_items if not item.is_shared]

    @property
    def unassigned_items(self) -> List[MenuItem]:
        return [item for item in self.personal_items if item.item_id not in self._assignments]

    @property
    def shared_items_total(self) -> Decimal:
        return sum((item.price for item in self.shared_items), Decimal(0))

    # Totals

    def breakdowns(self) -> List[DinerTotal]:
        """
        Calculate every diner's breakdown in the order they were added

        Raises:
            InvalidDinerCount: if no diners have been added
        """
        if not self._diners:
            raise InvalidDinerCount("Cannot split the bill without any diners")

        shared_items_total = self.shared_items_total
        diner_count = len(self._diners)

        return [
            DinerTotal(
                diner_id=diner.diner_id,
                name=diner.name,
                tip_percentage=diner.tip_percentage,
                breakdown=diner.breakdown(
                    shared_items_total,
                    self._service_charge_percentage,
                    diner_count
                ),
            )
            for diner in self._diners
        ]

    def calculate_totals(self) -> Dict[str, Decimal]:
        """Return each diner's total keyed by diner id."""
        return {entry.diner_id: entry.total for entry in self.breakdowns()}

    def totals_by_name(self) -> Dict[str, Decimal]:
        """
        Return each diner's total keyed by name.

        Diners sharing a name collapse into one entry, the later diner winning.
        Use calculate_totals() when names may repeat.
        """
        return {entry.name: entry.total for entry in self.breakdowns()}
