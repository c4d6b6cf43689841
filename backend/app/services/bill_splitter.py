"""Bill splitting service"""
from loguru import logger

from billsplit import BillSplitter, Diner, MenuItem, build_report
from billsplit.class_models import BillReport
from ..models.response_models import SplitBillRequest


class BillSplitterService:
    def build_splitter(self, request: SplitBillRequest) -> BillSplitter:
        """
        Build a BillSplitter from a split request

        Diners are added first so every personal item can be assigned as soon
        as it is added. Items without `assigned_to` stay unassigned.

        Raises:
            NotFound: if an item is assigned to a diner not on the bill
        """
        splitter = BillSplitter(request.service_charge_percentage)

        for diner_request in request.diners:
            splitter.add_diner(Diner(diner_request.name, diner_request.tip_percentage))

        for item_request in request.items:
            item = splitter.add_menu_item(
                MenuItem(item_request.name, item_request.price, item_request.is_shared)
            )
            if item_request.assigned_to is None:
                if not item.is_shared:
                    logger.warning(f"Personal item '{item.name}' has no diner. Its cost will not be allocated.")
                continue

            diner = splitter.find_diner(item_request.assigned_to)
            splitter.assign_item(item.item_id, diner.diner_id)

        return splitter

    def split_bill(self, request: SplitBillRequest) -> BillReport:
        """
        Calculate the bill split for a request

        Returns:
            BillReport with per-diner totals sorted highest first
        """
        splitter = self.build_splitter(request)
        report = build_report(splitter)

        logger.info("--- Bill Breakdown ---")
        for entry in splitter.breakdowns():
            breakdown = entry.breakdown
            logger.info(f"{entry.name}:")
            logger.info(f"  Personal Items: ${breakdown.personal_total:.2f}")
            logger.info(f"  Shared Share: ${breakdown.shared_allocation:.2f}")
            logger.info(f"  Service Charge: ${breakdown.service_charge:.2f}")
            logger.info(f"  Tip: ${breakdown.tip:.2f}")
            logger.info(f"  Total: ${breakdown.total:.2f}")
        logger.info(f"Calculated Total Bill: ${report.grand_total:.2f}")

        return report


# Global service instance
bill_splitter_service = BillSplitterService()
