"""Interactive terminal front end for the bill splitter"""
from decimal import Decimal, InvalidOperation
from typing import Callable
from loguru import logger

from .bill_splitter import BillSplitter
from .class_models import MenuItem
from .config import settings
from .diner import Diner
from .exceptions import BillSplitterError, NotFound
from .logging_config import configure_logging
from .report import build_report, format_money, render_report


class ConsoleShell:
    """
    Walks the user through a bill: items, diners, assignments, then the summary.

    All reading and printing goes through `input_func` and `output_func` so the
    flow can be driven by scripted input.
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        currency_symbol: str = "$"
    ):
        self.input_func = input_func
        self.output_func = output_func
        self.currency_symbol = currency_symbol

    def ask(self, prompt: str) -> str:
        return self.input_func(prompt).strip()

    def prompt_non_negative_decimal(self, prompt: str) -> Decimal:
        """Keep asking until the answer parses as a number that is zero or more."""
        answer = self.ask(prompt)
        while True:
            try:
                value = Decimal(answer)
                if value.is_finite() and value >= 0:
                    return value
            except InvalidOperation:
                pass
            answer = self.ask("Invalid input. Please enter a positive number: ")

    def collect_items(self, splitter: BillSplitter) -> None:
        while True:
            name = self.ask("Item name: ")
            if not name:
                break

            price = self.prompt_non_negative_decimal("Price: ")
            is_shared = self.ask("Is this a shared item? (y/n): ").lower() == "y"

            splitter.add_menu_item(MenuItem(name, price, is_shared))

    def collect_diners(self, splitter: BillSplitter) -> None:
        while True:
            name = self.ask("Diner name: ")
            if not name:
                break

            tip = self.prompt_non_negative_decimal("Tip percentage (e.g., 15): ")
            splitter.add_diner(Diner(name, tip))

    def collect_assignments(self, splitter: BillSplitter) -> None:
        if not splitter.diners:
            logger.warning("No diners to assign personal items to")
            return

        diner_names = ", ".join(diner.name for diner in splitter.diners)
        for item in splitter.unassigned_items:
            self.output_func(f"\nAssigning: {item.name} ({format_money(item.price, self.currency_symbol)})")
            self.output_func(f"Available diners: {diner_names}")

            while True:
                diner_name = self.ask("Enter diner name: ")
                try:
                    diner = splitter.find_diner(diner_name)
                    splitter.assign_item(item.item_id, diner.diner_id)
                    break
                except NotFound as e:
                    self.output_func(f"Error: {e}. Try again.")

    def run(self) -> int:
        """Run a full session. Returns the process exit code."""
        self.output_func("BILL SPLITTER")
        self.output_func("=============")

        try:
            service_charge = self.prompt_non_negative_decimal(
                "Enter service charge percentage (e.g., 12.5): "
            )
            splitter = BillSplitter(service_charge)

            self.output_func("\nADD MENU ITEMS (leave name blank when done)")
            self.collect_items(splitter)

            self.output_func("\nADD DINERS (leave name blank when done)")
            self.collect_diners(splitter)

            self.output_func("\nASSIGN PERSONAL ITEMS")
            self.collect_assignments(splitter)

            report = build_report(splitter)
        except BillSplitterError as e:
            logger.error(f"Bill splitting failed: {e}")
            self.output_func(f"Error: {e}")
            return 1
        except (EOFError, KeyboardInterrupt):
            self.output_func("\nAborted.")
            return 1

        self.output_func("\n" + render_report(report, self.currency_symbol))
        return 0


def main():
    """Console entry point"""
    configure_logging(settings.log_level, settings.log_file, settings.log_rotation)
    raise SystemExit(ConsoleShell(currency_symbol=settings.currency_symbol).run())


if __name__ == "__main__":
    main()
