"""
Booking Service - creates a booking, its payment and its seats atomically

Everything happens on one session inside `session.begin()`: any exception
raised by a step rolls the whole transaction back before it propagates, so a
booking is persisted with exactly one payment and TotalSeats seat rows, or not
at all.
"""
import asyncio
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from movie_booking.core.config import Settings
from movie_booking.core.database import Database
from movie_booking.models import Booking, Payment, PaymentStatus, Seat, SeatStatus
from movie_booking.services.exceptions import (
    BookingFailedError,
    NoShowsAvailableError,
    SeatSelectionError,
)
from movie_booking.services.id_allocator import IdentifierAllocator, get_allocator
from movie_booking.services.show_resolver import ShowResolver

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")

# Store-level failures that abort the booking transaction
STORE_ERRORS = (SQLAlchemyError, asyncio.TimeoutError, OSError)


def calculate_total_price(total_seats: int, price_per_seat: Decimal) -> Decimal:
    """TotalSeats x price, rounded half-up to 2 places"""
    return (Decimal(total_seats) * Decimal(price_per_seat)).quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass
class BookingReceipt:
    booking_id: int
    show_id: int
    movie_title: str
    theater_name: str
    show_time: datetime
    total_seats: int
    total_price: Decimal
    payment_status: str
    selected_seats: List[str] = field(default_factory=list)


class BookingService:
    """Booking Transaction Orchestrator"""

    def __init__(
        self,
        database: Database,
        settings: Settings,
        resolver: Optional[ShowResolver] = None,
        allocator: Optional[IdentifierAllocator] = None,
    ):
        self.database = database
        self.settings = settings
        self.resolver = resolver or ShowResolver()
        self.allocator = allocator or get_allocator(settings.ID_ALLOCATION_STRATEGY)

    def _check_seats(self, seats: List[str]):
        if not self.settings.REJECT_DUPLICATE_SEATS:
            return
        duplicates = sorted({seat for seat in seats if seats.count(seat) > 1})
        if duplicates:
            raise SeatSelectionError(f"Seats selected more than once: {', '.join(duplicates)}")

    async def create_booking(
        self,
        user_id: int,
        movie_title: Optional[str],
        theater_name: Optional[str],
        selected_seats: Sequence[str] = (),
        payment_mode: Optional[str] = None,
    ) -> BookingReceipt:
        """
        Create a booking with its payment and seat rows in one transaction

        Steps:
        1. Resolve the show from free-text movie/theater
        2. Insert the booking (TotalSeats x PRICE_PER_SEAT)
        3. Insert a completed payment for the full amount
        4. Insert one Booked seat row per selected seat, in input order
        5. Commit

        Raises:
            NoShowsAvailableError: If no show exists at all
            SeatSelectionError: If duplicate seats are rejected by configuration
            BookingFailedError: If the store fails at any step (rolled back)
        """
        movie_title = (movie_title or "").strip()
        theater_name = (theater_name or "").strip()
        seats = [str(seat) for seat in (selected_seats or [])]
        payment_mode = payment_mode or self.settings.DEFAULT_PAYMENT_MODE
        self._check_seats(seats)

        total_seats = len(seats)
        total_price = calculate_total_price(total_seats, self.settings.PRICE_PER_SEAT)
        start_time = time.time()

        try:
            async with self.database.session() as session:
                async with session.begin():
                    # 1. Resolve show
                    show = await self.resolver.resolve_show(session, movie_title, theater_name)
                    now = datetime.now()

                    # 2. Booking
                    booking_id = await self.allocator.next_id(session, Booking.__table__, "BookingID")
                    session.add(Booking(
                        booking_id=booking_id,
                        user_id=user_id,
                        show_id=show.show_id,
                        booking_date=now,
                        total_seats=total_seats,
                        total_price=total_price,
                    ))
                    await session.flush()

                    # 3. Payment
                    payment_id = await self.allocator.next_id(session, Payment.__table__, "PaymentID")
                    session.add(Payment(
                        payment_id=payment_id,
                        booking_id=booking_id,
                        payment_date=now,
                        payment_mode=payment_mode,
                        payment_status=PaymentStatus.COMPLETED.value,
                        amount_paid=total_price,
                    ))
                    await session.flush()

                    # 4. Seats
                    if seats:
                        seat_ids = await self.allocator.next_ids(session, Seat.__table__, "SeatID", total_seats)
                        session.add_all([
                            Seat(
                                seat_id=seat_id,
                                seat_number=seat_number,
                                booking_id=booking_id,
                                screen_id=show.screen_id,
                                status=SeatStatus.BOOKED.value,
                            )
                            for seat_id, seat_number in zip(seat_ids, seats)
                        ])
                        await session.flush()
                # 5. Committed on leaving session.begin()

        except NoShowsAvailableError:
            logger.warning(
                f"No show available for movie={movie_title!r} theater={theater_name!r}",
                extra={"user_id": user_id},
            )
            raise
        except STORE_ERRORS as e:
            logger.exception(
                f"Booking transaction rolled back for movie={movie_title!r} "
                f"theater={theater_name!r} seats={seats}",
                extra={"user_id": user_id},
            )
            raise BookingFailedError("Failed to create booking.", cause=e) from e

        duration_ms = round((time.time() - start_time) * 1000, 2)
        logger.info(
            f"Booking {booking_id} created: {total_seats} seats, total {total_price}",
            extra={
                "user_id": user_id,
                "show_id": show.show_id,
                "booking_id": booking_id,
                "duration_ms": duration_ms,
            },
        )

        return BookingReceipt(
            booking_id=booking_id,
            show_id=show.show_id,
            movie_title=show.movie_title,
            theater_name=show.theater_name,
            show_time=show.show_time,
            total_seats=total_seats,
            total_price=total_price,
            payment_status=PaymentStatus.COMPLETED.value,
            selected_seats=seats,
        )
