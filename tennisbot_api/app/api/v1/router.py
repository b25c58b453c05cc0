"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers (orders, customers, contact,
admin) under a unified prefix.  When new endpoints are added, update
this file to include their routers.
"""

from fastapi import APIRouter

from .endpoints import admin, contact, customers, health, orders


router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
router.include_router(customers.router, prefix="/customers", tags=["customers"])
router.include_router(contact.router, prefix="/contact", tags=["contact"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
