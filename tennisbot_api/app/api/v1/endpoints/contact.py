"""
Contact form endpoint for API v1.

Stores a general inquiry from the website.  Inquiries are not tied to
orders and there is no route to read them back; administrators only see
their count in the statistics.
"""

import logging

from fastapi import APIRouter, HTTPException, status

from tennisbot_api.app.schemas.common import ErrorResponse
from tennisbot_api.app.schemas.inquiry import InquiryCreate, InquiryCreated
from tennisbot_api.app.services.inquiry_service import InquiryService


logger = logging.getLogger(__name__)

router = APIRouter()

INQUIRY_CONFIRMATION = "Thank you for your inquiry. We will respond within 24 hours."


@router.post(
    "",
    response_model=InquiryCreated,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Submit a contact inquiry",
)
async def create_inquiry(inquiry: InquiryCreate) -> InquiryCreated:
    try:
        inquiry_id = await InquiryService.create_inquiry(inquiry)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception:
        logger.exception("Error creating inquiry")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to submit inquiry. Please try again.",
        )
    return InquiryCreated(inquiry_id=inquiry_id, message=INQUIRY_CONFIRMATION)
