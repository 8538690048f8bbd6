"""Bookings API endpoints"""
import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from movie_booking.core.config import Settings, get_settings
from movie_booking.core.database import Database, get_database
from movie_booking.api.title_aliases import normalize_movie_title
from movie_booking.schemas import (
    BookingCreate,
    BookingCreatedResponse,
    BookingListResponse,
    BookingReceiptResponse,
    BookingSummaryResponse,
)
from movie_booking.services import (
    BookingFailedError,
    BookingHistoryReadError,
    BookingHistoryService,
    BookingService,
    NoShowsAvailableError,
    SeatSelectionError,
)

logger = logging.getLogger(__name__)

router = APIRouter()


async def get_current_user_id(
    user_id: int = Query(..., gt=0, description="Authenticated user ID, resolved by the session layer")
) -> int:
    return user_id


def get_booking_service(
    database: Database = Depends(get_database),
    settings: Settings = Depends(get_settings),
) -> BookingService:
    return BookingService(database, settings)


def get_history_service(database: Database = Depends(get_database)) -> BookingHistoryService:
    return BookingHistoryService(database)


@router.post(
    "/bookings",
    response_model=BookingCreatedResponse,
    response_model_by_alias=True,
    status_code=201,
)
async def create_booking(
    booking_data: BookingCreate,
    user_id: int = Depends(get_current_user_id),
    service: BookingService = Depends(get_booking_service),
):
    """
    Book seats for a show and record the payment

    The movie title goes through the alias table first; the theater is
    matched loosely by the resolver.
    """
    try:
        receipt = await service.create_booking(
            user_id=user_id,
            movie_title=normalize_movie_title(booking_data.movie_title),
            theater_name=booking_data.theater,
            selected_seats=booking_data.selected_seats,
            payment_mode=booking_data.payment_mode,
        )
    except NoShowsAvailableError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except SeatSelectionError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BookingFailedError:
        # Cause is already logged by the service
        raise HTTPException(status_code=500, detail="Failed to create booking.")

    return BookingCreatedResponse(booking=BookingReceiptResponse.from_receipt(receipt))


@router.get("/bookings", response_model=BookingListResponse, response_model_by_alias=True)
async def list_user_bookings(
    user_id: int = Depends(get_current_user_id),
    service: BookingHistoryService = Depends(get_history_service),
):
    """List all bookings for the current user, most recent first"""
    try:
        summaries = await service.list_bookings(user_id)
    except BookingHistoryReadError:
        raise HTTPException(status_code=500, detail="Failed to fetch bookings.")

    return BookingListResponse(
        bookings=[BookingSummaryResponse.from_summary(s) for s in summaries],
    )
