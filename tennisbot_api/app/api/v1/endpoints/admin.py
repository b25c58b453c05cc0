"""
Administrator endpoints for API v1.

Order listing, status changes and the statistics overview used by the
admin dashboard.  Every route depends on ``require_admin``, which only
checks anything when ``ADMIN_TOKEN`` is configured.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from tennisbot_api.app.core.security import require_admin
from tennisbot_api.app.schemas.common import ErrorResponse
from tennisbot_api.app.schemas.order import OrderList, OrderStatusUpdate, OrderStatusUpdated
from tennisbot_api.app.schemas.statistics import StatsEnvelope
from tennisbot_api.app.services.order_service import OrderService
from tennisbot_api.app.services.statistics_service import StatisticsService


logger = logging.getLogger(__name__)

router = APIRouter(
    dependencies=[Depends(require_admin)],
    responses={401: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.get("/orders", response_model=OrderList, summary="List all orders")
async def list_orders() -> OrderList:
    """Return every order, newest first."""
    try:
        orders = await OrderService.list_orders()
    except Exception:
        logger.exception("Error fetching all orders")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch orders",
        )
    return OrderList(orders=orders)


@router.put(
    "/orders/{order_id}/status",
    response_model=OrderStatusUpdated,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Change an order's status",
)
async def update_order_status(
    update: OrderStatusUpdate,
    order_id: str = Path(..., description="Order id"),
) -> OrderStatusUpdated:
    """Move an order to one of ``pending``, ``confirmed``, ``shipped``,
    ``delivered`` or ``cancelled``.

    Transitions are not restricted; any of the five values may follow any
    other.  Returns 400 for a missing or unknown status and 404 for an
    unknown order.
    """
    try:
        order = await OrderService.update_status(order_id, update.status)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Error updating status of order %s", order_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update order status",
        )
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return OrderStatusUpdated(order=order)


@router.get("/stats", response_model=StatsEnvelope, summary="Order statistics")
async def get_stats() -> StatsEnvelope:
    try:
        stats = await StatisticsService.overview()
    except Exception:
        logger.exception("Error fetching stats")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch statistics",
        )
    return StatsEnvelope(stats=stats)
