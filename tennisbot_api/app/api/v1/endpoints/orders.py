"""
Order endpoints for API v1.

Customers submit the order form here and can look an order up by its
id.  Validation problems are answered with 400, unknown ids with 404
and every other failure with a generic 500 message; the underlying
error is only written to the server log.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Header, HTTPException, Path, Response, status

from tennisbot_api.app.schemas.common import ErrorResponse
from tennisbot_api.app.schemas.order import OrderCreate, OrderCreated, OrderEnvelope
from tennisbot_api.app.services.order_service import OrderService


logger = logging.getLogger(__name__)

router = APIRouter()

ORDER_CONFIRMATION = "Order created successfully. We will contact you within 24 hours."


@router.post(
    "",
    response_model=OrderCreated,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Place an order",
)
async def create_order(
    order: OrderCreate,
    response: Response,
    idempotency_key: Optional[str] = Header(None, alias="Idempotency-Key"),
) -> OrderCreated:
    """Create a pending order for the TennisBot Pro.

    Requires ``name``, ``email`` and ``phone``.  Sending the same
    ``Idempotency-Key`` header again returns the original order id
    with status 200 instead of creating a duplicate.
    """
    try:
        order_id, created = await OrderService.create_order(order, idempotency_key)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Error creating order")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create order. Please try again.",
        )
    if not created:
        response.status_code = status.HTTP_200_OK
    return OrderCreated(order_id=order_id, message=ORDER_CONFIRMATION)


@router.get(
    "/{order_id}",
    response_model=OrderEnvelope,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get an order",
)
async def get_order(order_id: str = Path(..., description="Order id")) -> OrderEnvelope:
    try:
        order = await OrderService.get_order(order_id)
    except Exception:
        logger.exception("Error fetching order %s", order_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch order",
        )
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return OrderEnvelope(order=order)
