"""Customer order history for API v1."""

import logging

from fastapi import APIRouter, HTTPException, Path, status

from tennisbot_api.app.schemas.common import ErrorResponse
from tennisbot_api.app.schemas.order import OrderList
from tennisbot_api.app.services.order_service import OrderService


logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/{email}/orders",
    response_model=OrderList,
    responses={500: {"model": ErrorResponse}},
    summary="List a customer's orders",
)
async def list_customer_orders(
    email: str = Path(..., description="Email address used when ordering"),
) -> OrderList:
    """Return the orders placed with ``email``, newest first.

    An address without orders gets an empty list rather than 404.
    """
    try:
        orders = await OrderService.list_customer_orders(email)
    except Exception:
        logger.exception("Error fetching orders for customer %s", email)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch customer orders",
        )
    return OrderList(orders=orders)
