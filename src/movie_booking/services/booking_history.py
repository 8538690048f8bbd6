"""
Booking History - denormalized per-user view of past bookings
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import AsyncIterator, Dict, List, Optional

from sqlalchemy import and_, select
from sqlalchemy.exc import SQLAlchemyError

from movie_booking.core.database import Database
from movie_booking.models import Booking, Movie, Payment, PaymentStatus, Screen, Seat, SeatStatus, Show, Theater
from movie_booking.services.exceptions import BookingHistoryReadError

logger = logging.getLogger(__name__)

SEAT_SEPARATOR = ", "


@dataclass
class BookingSummary:
    booking_id: int
    booking_date: datetime
    total_seats: int
    total_price: Decimal
    movie_title: Optional[str]
    theater_name: Optional[str]
    show_time: Optional[datetime]
    payment_status: str
    seats: Optional[str]


class BookingHistoryService:
    """Booking History Reader"""

    def __init__(self, database: Database):
        self.database = database

    @staticmethod
    def _history_query(user_id: int):
        return (
            select(
                Booking.booking_id.label("booking_id"),
                Booking.booking_date.label("booking_date"),
                Booking.total_seats.label("total_seats"),
                Booking.total_price.label("total_price"),
                Movie.title.label("movie_title"),
                Theater.name.label("theater_name"),
                Show.show_time.label("show_time"),
                Payment.payment_status.label("payment_status"),
                Seat.seat_id.label("seat_id"),
                Seat.seat_number.label("seat_number"),
            )
            .select_from(Booking)
            .outerjoin(Show, Show.show_id == Booking.show_id)
            .outerjoin(Movie, Movie.movie_id == Show.movie_id)
            .outerjoin(Screen, Screen.screen_id == Show.screen_id)
            .outerjoin(Theater, Theater.theater_id == Screen.theater_id)
            .outerjoin(Payment, Payment.booking_id == Booking.booking_id)
            .outerjoin(
                Seat,
                and_(Seat.booking_id == Booking.booking_id, Seat.status == SeatStatus.BOOKED.value),
            )
            .where(Booking.user_id == user_id)
            .order_by(Booking.booking_date.desc(), Booking.booking_id.desc())
        )

    async def iter_bookings(self, user_id: int) -> AsyncIterator[BookingSummary]:
        """
        Yield the user's bookings, most recent first.

        Every call re-reads the store. Rows are grouped per booking; seat
        numbers are sorted and comma-joined.
        """
        try:
            async with self.database.session() as session:
                result = await session.execute(self._history_query(user_id))
                rows = result.all()
        except SQLAlchemyError as e:
            logger.exception("Failed to read booking history", extra={"user_id": user_id})
            raise BookingHistoryReadError("Failed to fetch bookings.", cause=e) from e

        summaries: Dict[int, BookingSummary] = {}
        seats: Dict[int, Dict[int, str]] = {}
        for row in rows:
            summary = summaries.get(row.booking_id)
            if summary is None:
                summary = BookingSummary(
                    booking_id=row.booking_id,
                    booking_date=row.booking_date,
                    total_seats=row.total_seats,
                    total_price=row.total_price,
                    movie_title=row.movie_title,
                    theater_name=row.theater_name,
                    show_time=row.show_time,
                    payment_status=row.payment_status or PaymentStatus.COMPLETED.value,
                    seats=None,
                )
                summaries[row.booking_id] = summary
                seats[row.booking_id] = {}
            if row.seat_id is not None:
                seats[row.booking_id][row.seat_id] = row.seat_number

        # dicts keep the query's booking order
        for booking_id, summary in summaries.items():
            numbers = sorted(seats[booking_id].values())
            if numbers:
                summary.seats = SEAT_SEPARATOR.join(numbers)
            yield summary

    async def list_bookings(self, user_id: int) -> List[BookingSummary]:
        """All bookings of a user, most recent first"""
        return [summary async for summary in self.iter_bookings(user_id)]
