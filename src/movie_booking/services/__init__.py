"""
Services package exports
"""
from movie_booking.services.exceptions import (
    BookingServiceError,
    NoShowsAvailableError,
    SeatSelectionError,
    BookingFailedError,
    BookingHistoryReadError,
)
from movie_booking.services.id_allocator import (
    IdentifierAllocator,
    MaxScanAllocator,
    SequenceAllocator,
    get_allocator,
)
from movie_booking.services.show_resolver import ShowResolver, ResolvedShow
from movie_booking.services.booking_service import BookingService, BookingReceipt
from movie_booking.services.booking_history import BookingHistoryService, BookingSummary

__all__ = [
    "BookingServiceError",
    "NoShowsAvailableError",
    "SeatSelectionError",
    "BookingFailedError",
    "BookingHistoryReadError",
    "IdentifierAllocator",
    "MaxScanAllocator",
    "SequenceAllocator",
    "get_allocator",
    "ShowResolver",
    "ResolvedShow",
    "BookingService",
    "BookingReceipt",
    "BookingHistoryService",
    "BookingSummary",
]
