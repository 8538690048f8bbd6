"""
Pydantic schemas for API request/response validation
"""
from movie_booking.schemas.booking import (
    BookingCreate,
    BookingReceiptResponse,
    BookingCreatedResponse,
    BookingSummaryResponse,
    BookingListResponse,
)

__all__ = [
    "BookingCreate",
    "BookingReceiptResponse",
    "BookingCreatedResponse",
    "BookingSummaryResponse",
    "BookingListResponse",
]
