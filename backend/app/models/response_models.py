from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Optional, List

from billsplit.class_models import BillReport


class BillItemRequest(BaseModel):
    name: str
    price: Decimal = Field(ge=0)
    is_shared: bool = False
    assigned_to: Optional[str] = None  # diner name, personal items only


class DinerRequest(BaseModel):
    name: str
    tip_percentage: Decimal = Field(default=Decimal(0), ge=0)


class SplitBillRequest(BaseModel):
    service_charge_percentage: Decimal = Field(default=Decimal(0), ge=0)
    items: List[BillItemRequest] = []
    diners: List[DinerRequest] = []


class SplitBillResponse(BaseModel):
    success: bool
    message: str
    report: Optional[BillReport] = None
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str
    message: str
    version: str
