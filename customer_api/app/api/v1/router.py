"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers.  When new domains are
introduced, update this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import customers

router = APIRouter()

router.include_router(customers.router, prefix="/customers", tags=["customers"])
