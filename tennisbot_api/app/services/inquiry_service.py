"""
Business logic for contact‑form inquiries.

Each inquiry is stored under ``inquiry:<id>`` and its id appended to
the ``inquiries:all`` index.  Inquiries are write‑only apart from the
count reported in the statistics.
"""

import logging
from datetime import datetime, timezone

from tennisbot_api.app.core import kv_store
from tennisbot_api.app.core.ids import generate_id
from tennisbot_api.app.schemas.inquiry import DEFAULT_SUBJECT, Inquiry, InquiryCreate


logger = logging.getLogger(__name__)

ALL_INQUIRIES_KEY = "inquiries:all"
REQUIRED_FIELDS = ("name", "email", "message")


class InquiryService:
    """Service for contact‑form submissions."""

    @classmethod
    async def create_inquiry(cls, data: InquiryCreate) -> str:
        """Persist a new inquiry and return its id.

        ``name``, ``email`` and ``message`` are required; a blank or
        missing ``subject`` becomes ``"General Inquiry"``.  Raises
        ``ValueError`` when a required field is missing.
        """
        values = {
            field: (getattr(data, field) or "").strip() for field in REQUIRED_FIELDS
        }
        if not all(values.values()):
            raise ValueError("Missing required fields: " + ", ".join(REQUIRED_FIELDS))

        inquiry = Inquiry(
            id=generate_id("inquiry"),
            subject=(data.subject or "").strip() or DEFAULT_SUBJECT,
            created_at=datetime.now(timezone.utc),
            **values,
        )
        kv_store.set_value(
            f"inquiry:{inquiry.id}", inquiry.model_dump(mode="json", by_alias=True)
        )

        kv_store.append_to_list(ALL_INQUIRIES_KEY, inquiry.id)

        logger.info("Inquiry created successfully: %s from %s", inquiry.id, inquiry.email)
        return inquiry.id

    @classmethod
    async def count_inquiries(cls) -> int:
        return len(kv_store.get_value(ALL_INQUIRIES_KEY) or [])
