"""Pydantic schemas for Booking resources"""
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator

from movie_booking.services.booking_history import BookingSummary
from movie_booking.services.booking_service import BookingReceipt


class BookingCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    movie_title: str = Field(..., alias="movieTitle", min_length=1)
    theater: Optional[str] = Field(None, max_length=255)
    selected_seats: List[str] = Field(..., alias="selectedSeats", min_length=1)
    payment_mode: Optional[str] = Field(None, alias="paymentMode", max_length=50)

    @field_validator("movie_title")
    @classmethod
    def movie_title_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Movie title is required")
        return v


class BookingReceiptResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    booking_id: int = Field(..., alias="bookingId")
    show_id: int = Field(..., alias="showId")
    movie_title: str = Field(..., alias="movieTitle")
    theater_name: str = Field(..., alias="theaterName")
    show_time: datetime = Field(..., alias="showTime")
    total_seats: int = Field(..., alias="totalSeats")
    total_price: Decimal = Field(..., alias="totalPrice")
    payment_status: str = Field(..., alias="paymentStatus")
    selected_seats: List[str] = Field(default_factory=list, alias="selectedSeats")

    @field_serializer("total_price")
    def serialize_total_price(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def from_receipt(cls, receipt: BookingReceipt):
        """Convert a BookingReceipt to response"""
        return cls(
            booking_id=receipt.booking_id,
            show_id=receipt.show_id,
            movie_title=receipt.movie_title,
            theater_name=receipt.theater_name,
            show_time=receipt.show_time,
            total_seats=receipt.total_seats,
            total_price=receipt.total_price,
            payment_status=receipt.payment_status,
            selected_seats=list(receipt.selected_seats),
        )


class BookingCreatedResponse(BaseModel):
    booking: BookingReceiptResponse


class BookingSummaryResponse(BaseModel):
    """One row of the booking history page"""

    model_config = ConfigDict(populate_by_name=True)

    booking_id: int = Field(..., alias="BookingID")
    booking_date: datetime = Field(..., alias="BookingDate")
    total_seats: int = Field(..., alias="TotalSeats")
    total_price: Decimal = Field(..., alias="TotalPrice")
    movie_title: Optional[str] = Field(None, alias="MovieTitle")
    theater_name: Optional[str] = Field(None, alias="TheaterName")
    show_time: Optional[datetime] = Field(None, alias="ShowTime")
    payment_status: str = Field(..., alias="PaymentStatus")
    seats: Optional[str] = Field(None, alias="Seats")

    @field_serializer("total_price")
    def serialize_total_price(self, value: Decimal) -> float:
        return float(value)

    @classmethod
    def from_summary(cls, summary: BookingSummary):
        return cls(
            booking_id=summary.booking_id,
            booking_date=summary.booking_date,
            total_seats=summary.total_seats,
            total_price=summary.total_price,
            movie_title=summary.movie_title,
            theater_name=summary.theater_name,
            show_time=summary.show_time,
            payment_status=summary.payment_status,
            seats=summary.seats,
        )


class BookingListResponse(BaseModel):
    bookings: List[BookingSummaryResponse]
