"""
Pydantic models for orders.

An order is a purchase request for the single TennisBot product.  The
product, price and currency are fixed and set by the service, never
taken from the request.  ``OrderCreate`` leaves every field optional so
that missing values are reported by the service with a 400 response
listing the required fields instead of a framework validation error.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import Field

from .common import CamelModel


PRODUCT_NAME = "TennisBot Pro"
PRODUCT_PRICE = 5000
PRODUCT_CURRENCY = "USD"


class OrderStatus(str, Enum):
    """Closed set of order states an administrator can assign."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderCreate(CamelModel):
    """Order form submitted by a customer."""

    name: Optional[str] = Field(None, examples=["Serena Smith"])
    email: Optional[str] = Field(None, examples=["serena@example.com"])
    phone: Optional[str] = Field(None, examples=["+1 555 0100"])
    organization: Optional[str] = Field(None, examples=["Riverside Tennis Club"])
    message: Optional[str] = Field(None, examples=["Please call before delivery."])


class Order(CamelModel):
    """Stored order record, also the read representation."""

    id: str
    name: str
    email: str
    phone: str
    organization: str = ""
    message: str = ""
    product: str = PRODUCT_NAME
    price: int = PRODUCT_PRICE
    currency: str = PRODUCT_CURRENCY
    # Plain string so records written with other status values stay
    # readable; new values are checked against OrderStatus on update.
    status: str = OrderStatus.PENDING.value
    created_at: datetime
    updated_at: datetime


class OrderCreated(CamelModel):
    success: bool = True
    order_id: str
    message: str


class OrderEnvelope(CamelModel):
    order: Order


class OrderList(CamelModel):
    orders: List[Order]


class OrderStatusUpdate(CamelModel):
    """Body of the admin status change.

    ``status`` is validated by the service against ``OrderStatus`` so
    that a missing or unknown value yields a 400 with a readable error.
    """

    status: Optional[str] = Field(None, examples=["shipped"])


class OrderStatusUpdated(CamelModel):
    success: bool = True
    order: Order
