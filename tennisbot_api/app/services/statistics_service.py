"""
Service layer for administrator statistics.

The overview is computed on every call by walking the global order
index and loading each record; nothing is cached.  That is a full scan
and is only suitable for the small order volumes of the storefront.
"""

from __future__ import annotations

from tennisbot_api.app.core import kv_store
from tennisbot_api.app.schemas.order import OrderStatus
from tennisbot_api.app.schemas.statistics import Stats
from tennisbot_api.app.services.inquiry_service import InquiryService
from tennisbot_api.app.services.order_service import ALL_ORDERS_KEY, OrderService


class StatisticsService:
    """Service providing aggregated order metrics for administrators."""

    @classmethod
    async def overview(cls) -> Stats:
        """Return order and inquiry totals.

        ``total_orders`` is the length of the order index, so an index
        entry whose record is missing still counts as an order but adds
        nothing to the revenue.  ``completed_orders`` counts orders that
        reached ``delivered``.  The average order value is ``0`` when no
        orders exist.
        """
        order_ids = kv_store.get_value(ALL_ORDERS_KEY) or []
        orders = await OrderService.resolve(order_ids)

        by_status = {status.value: 0 for status in OrderStatus}
        total_revenue = 0
        for order in orders:
            total_revenue += order.price
            # Statuses outside OrderStatus are counted under their raw value.
            by_status[order.status] = by_status.get(order.status, 0) + 1

        total_orders = len(order_ids)
        return Stats(
            total_orders=total_orders,
            total_inquiries=await InquiryService.count_inquiries(),
            total_revenue=total_revenue,
            pending_orders=by_status[OrderStatus.PENDING.value],
            completed_orders=by_status[OrderStatus.DELIVERED.value],
            average_order_value=total_revenue / total_orders if total_orders else 0,
            orders_by_status=by_status,
        )
