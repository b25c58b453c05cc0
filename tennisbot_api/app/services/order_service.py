"""
Business logic for orders.

Orders live in the key‑value store under ``order:<id>``.  Two id lists
make them enumerable: the global ``orders:all`` index and a
per‑customer ``customer:<email>:orders`` index.  Both lists only ever
grow.  Creating an order issues the record write and the two index
writes one after another; there is no rollback, so a failure part way
through can leave an index entry without its record (readers skip
those) or a record that no index lists.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from pydantic import ValidationError

from tennisbot_api.app.core import kv_store
from tennisbot_api.app.core.ids import generate_id
from tennisbot_api.app.schemas.order import (
    Order,
    OrderCreate,
    OrderStatus,
)


logger = logging.getLogger(__name__)

ALL_ORDERS_KEY = "orders:all"
REQUIRED_FIELDS = ("name", "email", "phone")


def order_key(order_id: str) -> str:
    return f"order:{order_id}"


def customer_orders_key(email: str) -> str:
    return f"customer:{email}:orders"


def idempotency_key(token: str) -> str:
    return f"idempotency:{token}"


def _clean(value: Optional[str]) -> str:
    return value.strip() if isinstance(value, str) else ""


def _save(order: Order) -> None:
    kv_store.set_value(order_key(order.id), order.model_dump(mode="json", by_alias=True))


def _newest_first(orders: List[Order]) -> List[Order]:
    # sorted() is stable with reverse=True, ties keep index order
    return sorted(orders, key=lambda o: o.created_at, reverse=True)


class OrderService:
    """Service for creating, reading and updating orders."""

    @classmethod
    async def create_order(
        cls,
        data: OrderCreate,
        idempotency_token: Optional[str] = None,
    ) -> Tuple[str, bool]:
        """Validate and persist a new order.

        Parameters
        ----------
        data : OrderCreate
            Customer input.  ``name``, ``email`` and ``phone`` must be
            non‑empty; ``organization`` and ``message`` default to an
            empty string.  Every field is stored with surrounding
            whitespace stripped, and the customer index is keyed by the
            stripped email, so lookups must use the trimmed address.
        idempotency_token : Optional[str]
            Client supplied token.  When an earlier request used the same
            token and its order still exists, that order's id is
            returned and nothing is written.

        Returns
        -------
        tuple
            ``(order_id, created)`` where ``created`` is ``False`` for a
            replayed request.

        Raises
        ------
        ValueError
            If a required field is missing or blank.
        """
        values = {field: _clean(getattr(data, field)) for field in REQUIRED_FIELDS}
        if not all(values.values()):
            raise ValueError("Missing required fields: " + ", ".join(REQUIRED_FIELDS))

        token = _clean(idempotency_token)
        if token:
            previous_id = kv_store.get_value(idempotency_key(token))
            if previous_id and kv_store.get_value(order_key(previous_id)) is not None:
                logger.info("Replayed order request %s for token %s", previous_id, token)
                return previous_id, False

        now = datetime.now(timezone.utc)
        order = Order(
            id=generate_id("order"),
            name=values["name"],
            email=values["email"],
            phone=values["phone"],
            organization=_clean(data.organization),
            message=_clean(data.message),
            status=OrderStatus.PENDING.value,
            created_at=now,
            updated_at=now,
        )

        _save(order)
        kv_store.append_to_list(customer_orders_key(order.email), order.id)
        kv_store.append_to_list(ALL_ORDERS_KEY, order.id)
        if token:
            kv_store.set_value(idempotency_key(token), order.id)

        logger.info("Order created successfully: %s for %s", order.id, order.email)
        return order.id, True

    @classmethod
    async def get_order(cls, order_id: str) -> Optional[Order]:
        """Return the order with ``order_id`` or ``None`` if unknown."""
        raw = kv_store.get_value(order_key(order_id))
        if raw is None:
            return None
        return Order.model_validate(raw)

    @classmethod
    async def resolve(cls, order_ids: List[str]) -> List[Order]:
        """Load the orders referenced by an index.

        Ids without a record are skipped silently; records that no longer
        match the ``Order`` model are skipped with a warning so a single
        bad entry does not break the listing.
        """
        records = kv_store.get_values(order_key(order_id) for order_id in order_ids)
        orders: List[Order] = []
        for order_id, raw in zip(order_ids, records):
            if raw is None:
                continue
            try:
                orders.append(Order.model_validate(raw))
            except ValidationError as e:
                logger.warning("Skipping unreadable order record %s: %s", order_id, e)
        return orders

    @classmethod
    async def list_orders(cls) -> List[Order]:
        """Return every indexed order, newest first."""
        order_ids = kv_store.get_value(ALL_ORDERS_KEY) or []
        return _newest_first(await cls.resolve(order_ids))

    @classmethod
    async def list_customer_orders(cls, email: str) -> List[Order]:
        """Return the orders placed with ``email``, newest first.

        An address that never ordered yields an empty list.
        """
        order_ids = kv_store.get_value(customer_orders_key(email)) or []
        return _newest_first(await cls.resolve(order_ids))

    @classmethod
    async def update_status(cls, order_id: str, status: Optional[str]) -> Optional[Order]:
        """Set a new status on an order.

        Only ``status`` and ``updated_at`` change.  Concurrent updates
        are not serialised; the last write wins.

        Returns
        -------
        Optional[Order]
            The updated order, or ``None`` if ``order_id`` is unknown.

        Raises
        ------
        ValueError
            If ``status`` is missing or not one of ``OrderStatus``.
        """
        status = _clean(status)
        if not status:
            raise ValueError("Status is required")
        try:
            new_status = OrderStatus(status)
        except ValueError:
            allowed = ", ".join(s.value for s in OrderStatus)
            raise ValueError(f"Invalid status '{status}'. Allowed values: {allowed}") from None

        order = await cls.get_order(order_id)
        if order is None:
            return None

        previous = order.status
        order = order.model_copy(
            update={"status": new_status.value, "updated_at": datetime.now(timezone.utc)}
        )
        _save(order)
        logger.info(
            "Order %s status updated: %s -> %s", order_id, previous, new_status.value
        )
        return order
