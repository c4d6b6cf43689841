from fastapi import APIRouter
from loguru import logger

from billsplit.exceptions import BillSplitterError
from ....models.response_models import (
    HealthResponse,
    SplitBillRequest,
    SplitBillResponse,
)
from ....services.bill_splitter import bill_splitter_service
from ....core.config import settings

router = APIRouter()


@router.post("/split", response_model=SplitBillResponse)
async def split_bill(request: SplitBillRequest):
    """
    Calculate how much each diner owes
    """
    try:
        report = bill_splitter_service.split_bill(request)

        return SplitBillResponse(
            success=True,
            message="Split calculated successfully",
            report=report
        )

    except BillSplitterError as e:
        logger.error(f"Error calculating split: {e}")
        return SplitBillResponse(
            success=False,
            message="Failed to calculate split",
            error=str(e)
        )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="healthy",
        message="Bill Splitter API is running",
        version=settings.app_version
    )
