"""Restaurant bill splitting engine"""
from .bill_splitter import BillSplitter
from .class_models import BillReport, DinerBreakdown, DinerTotal, MenuItem
from .diner import Diner
from .exceptions import (
    BillSplitterError,
    InvalidDinerCount,
    InvalidPercentage,
    InvalidPrice,
    ItemAlreadyAssigned,
    NotFound,
)
from .report import build_report, render_report

__version__ = "1.0.0"
