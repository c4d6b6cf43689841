"""Bill summary: structured report plus console rendering"""
from decimal import ROUND_HALF_UP, Decimal
from typing import List

from .bill_splitter import BillSplitter
from .class_models import BillReport, MenuItem, ReportDiner, ReportItem, ReportTotal

CENT = Decimal("0.01")


def to_money(amount: Decimal) -> Decimal:
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_money(amount: Decimal, currency_symbol: str = "$") -> str:
    return f"{currency_symbol}{to_money(amount):.2f}"


def format_percentage(value: Decimal) -> str:
    return f"{value:f}%"


def _report_items(items: List[MenuItem]) -> List[ReportItem]:
    return [ReportItem(name=item.name, price=to_money(item.price)) for item in items]


def build_report(splitter: BillSplitter) -> BillReport:
    """
    Summarise a bill into plain data

    Prices and totals are rounded to cents. Totals are sorted highest first;
    diners with equal totals keep the order they were added in.

    Raises:
        InvalidDinerCount: if the bill has no diners
    """
    entries = splitter.breakdowns()
    totals = sorted(
        (ReportTotal(diner_id=e.diner_id, name=e.name, total=to_money(e.total)) for e in entries),
        key=lambda t: t.total,
        reverse=True,
    )

    return BillReport(
        service_charge_percentage=splitter.service_charge_percentage,
        diners=[
            ReportDiner(
                name=diner.name,
                tip_percentage=diner.tip_percentage,
                personal_items=_report_items(list(diner.personal_items)),
            )
            for diner in splitter.diners
        ],
        shared_items=_report_items(splitter.shared_items),
        shared_items_total=to_money(splitter.shared_items_total),
        totals=totals,
        grand_total=to_money(sum((e.total for e in entries), Decimal(0))),
        unassigned_items=_report_items(splitter.unassigned_items),
    )


def render_report(report: BillReport, currency_symbol: str = "$") -> str:
    """Render a BillReport as the text printed at the end of a console session."""
    lines = [
        "BILL SUMMARY",
        "============",
        "",
        f"Service Charge: {format_percentage(report.service_charge_percentage)}",
        "",
        "Diners:",
    ]

    for diner in report.diners:
        lines.append(f"- {diner.name} (Tip: {format_percentage(diner.tip_percentage)})")
        if diner.personal_items:
            lines.append("  Personal items:")
            for item in diner.personal_items:
                lines.append(f"    {item.name}: {format_money(item.price, currency_symbol)}")

    if report.shared_items:
        lines.extend(["", "Shared items (split equally):"])
        for item in report.shared_items:
            lines.append(f"- {item.name}: {format_money(item.price, currency_symbol)}")

    if report.unassigned_items:
        lines.extend(["", "Unassigned items (not charged to anyone):"])
        for item in report.unassigned_items:
            lines.append(f"- {item.name}: {format_money(item.price, currency_symbol)}")

    lines.extend(["", "TOTALS"])
    for total in report.totals:
        lines.append(f"{total.name}: {format_money(total.total, currency_symbol)}")

    return "\n".join(lines)
