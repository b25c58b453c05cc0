"""
Pydantic models for contact‑form inquiries.

Inquiries are independent of orders.  They are only created and
counted; there are no read or update routes for them.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .common import CamelModel


DEFAULT_SUBJECT = "General Inquiry"
INQUIRY_STATUS_NEW = "new"


class InquiryCreate(CamelModel):
    name: Optional[str] = Field(None, examples=["Rafael Diaz"])
    email: Optional[str] = Field(None, examples=["rafael@example.com"])
    subject: Optional[str] = Field(None, examples=["Bulk pricing"])
    message: Optional[str] = Field(None, examples=["Do you offer discounts for schools?"])


class Inquiry(CamelModel):
    id: str
    name: str
    email: str
    subject: str = DEFAULT_SUBJECT
    message: str
    created_at: datetime
    status: str = INQUIRY_STATUS_NEW


class InquiryCreated(CamelModel):
    success: bool = True
    inquiry_id: str
    message: str
