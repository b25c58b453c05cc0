"""Pydantic models for the administrator statistics overview."""

from typing import Dict

from pydantic import Field

from .common import CamelModel


class Stats(CamelModel):
    total_orders: int = 0
    total_inquiries: int = 0
    total_revenue: int = 0
    pending_orders: int = 0
    # Orders that reached ``delivered``.
    completed_orders: int = 0
    average_order_value: float = 0
    orders_by_status: Dict[str, int] = Field(default_factory=dict)


class StatsEnvelope(CamelModel):
    stats: Stats
