"""
Booking core error taxonomy
"""
from typing import Optional


class BookingServiceError(Exception):
    """Base exception for booking service errors"""
    pass


class NoShowsAvailableError(BookingServiceError):
    """Raised when no show can be resolved because the schedule is empty"""
    pass


class SeatSelectionError(BookingServiceError):
    """Raised when the requested seat numbers are rejected before booking"""
    pass


class BookingFailedError(BookingServiceError):
    """Raised when the booking transaction failed and was rolled back"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class BookingHistoryReadError(BookingServiceError):
    """Raised when a user's booking history cannot be read"""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause
