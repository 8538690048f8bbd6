import pytest
from datetime import datetime
from decimal import Decimal

from movie_booking.models import Booking, Payment, Seat
from movie_booking.services import BookingHistoryReadError, BookingHistoryService


async def add_booking(database, booking_id, user_id, show_id, booked_at, seats=(), payment_status="Completed"):
    """Insert a booking with optional payment and seat rows; seats are (SeatID, SeatNumber, Status)"""
    total_price = Decimal("190.23") * len(seats)
    async with database.session() as session:
        async with session.begin():
            session.add(Booking(
                booking_id=booking_id,
                user_id=user_id,
                show_id=show_id,
                booking_date=booked_at,
                total_seats=len(seats),
                total_price=total_price,
            ))
            await session.flush()
            if payment_status:
                session.add(Payment(
                    payment_id=booking_id,
                    booking_id=booking_id,
                    payment_date=booked_at,
                    payment_mode="Card",
                    payment_status=payment_status,
                    amount_paid=total_price,
                ))
            session.add_all([
                Seat(seat_id=seat_id, seat_number=number, booking_id=booking_id, screen_id=10, status=status)
                for seat_id, number, status in seats
            ])


@pytest.fixture
def history(schedule):
    return BookingHistoryService(schedule)


@pytest.mark.asyncio
async def test_summary_joins_show_movie_theater(schedule, history):
    await add_booking(schedule, 1, 5, 2, datetime(2026, 1, 1, 10, 0), seats=[(1, "B2", "Booked"), (2, "B1", "Booked")])

    [summary] = await history.list_bookings(5)

    assert summary.booking_id == 1
    assert summary.booking_date == datetime(2026, 1, 1, 10, 0)
    assert summary.total_seats == 2
    assert summary.total_price == Decimal("380.46")
    assert summary.movie_title == "Dune 2"
    assert summary.theater_name == "PVR Cinemas, Pune"
    assert summary.show_time == datetime(2026, 1, 2, 18, 0)
    assert summary.payment_status == "Completed"
    # sorted, not insertion order
    assert summary.seats == "B1, B2"


@pytest.mark.asyncio
async def test_most_recent_first(schedule, history):
    await add_booking(schedule, 1, 5, 1, datetime(2026, 1, 1, 10, 0))
    await add_booking(schedule, 2, 5, 2, datetime(2026, 1, 3, 10, 0))
    await add_booking(schedule, 3, 5, 3, datetime(2026, 1, 2, 10, 0))

    summaries = await history.list_bookings(5)

    assert [s.booking_id for s in summaries] == [2, 3, 1]


@pytest.mark.asyncio
async def test_only_users_own_bookings(schedule, history):
    await add_booking(schedule, 1, 5, 1, datetime(2026, 1, 1, 10, 0))
    await add_booking(schedule, 2, 6, 1, datetime(2026, 1, 1, 11, 0))

    assert [s.booking_id for s in await history.list_bookings(6)] == [2]
    assert await history.list_bookings(99) == []


@pytest.mark.asyncio
async def test_only_booked_seats_are_listed(schedule, history):
    await add_booking(
        schedule, 1, 5, 1, datetime(2026, 1, 1, 10, 0),
        seats=[(1, "A1", "Booked"), (2, "A2", "Released"), (3, "A3", "Booked")],
    )

    [summary] = await history.list_bookings(5)
    assert summary.seats == "A1, A3"


@pytest.mark.asyncio
async def test_missing_payment_defaults_to_completed(schedule, history):
    await add_booking(schedule, 1, 5, 1, datetime(2026, 1, 1, 10, 0), payment_status=None)

    [summary] = await history.list_bookings(5)
    assert summary.payment_status == "Completed"
    assert summary.seats is None


@pytest.mark.asyncio
async def test_booking_for_unknown_show_still_listed(schedule, history):
    await add_booking(schedule, 1, 5, 404, datetime(2026, 1, 1, 10, 0), seats=[(1, "A1", "Booked")])

    [summary] = await history.list_bookings(5)
    assert summary.movie_title is None
    assert summary.theater_name is None
    assert summary.show_time is None
    assert summary.seats == "A1"


@pytest.mark.asyncio
async def test_each_call_rereads_store(schedule, history):
    await add_booking(schedule, 1, 5, 1, datetime(2026, 1, 1, 10, 0))
    first = [s.booking_id async for s in history.iter_bookings(5)]

    await add_booking(schedule, 2, 5, 1, datetime(2026, 1, 2, 10, 0))
    second = [s.booking_id async for s in history.iter_bookings(5)]

    assert first == [1]
    assert second == [2, 1]


@pytest.mark.asyncio
async def test_read_failure(schedule, history):
    await schedule.drop_all()

    with pytest.raises(BookingHistoryReadError) as exc_info:
        await history.list_bookings(5)

    assert exc_info.value.cause is not None
