"""Version 1 API routes"""
from fastapi import APIRouter
from .endpoints import bills

api_router = APIRouter()
api_router.include_router(
    bills.router,
    prefix="/bills",
    tags=["bills"],
    responses={422: {"description": "Price, tip or service charge is missing, non-numeric or negative"}},
)
