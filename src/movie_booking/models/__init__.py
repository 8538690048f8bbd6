"""
SQLAlchemy Models for Movie Booking System

Import all models here for easy access and to ensure proper relationship setup.
"""
from movie_booking.core.database import Base

# Import all models to register them with SQLAlchemy
from movie_booking.models.user import User
from movie_booking.models.show import Movie, Theater, Screen, Show
from movie_booking.models.booking import Booking, Payment, PaymentStatus
from movie_booking.models.seat import Seat, SeatStatus
from movie_booking.models.id_sequence import IdSequence

# Export all models
__all__ = [
    "Base",
    "User",
    "Movie",
    "Theater",
    "Screen",
    "Show",
    "Booking",
    "Payment",
    "PaymentStatus",
    "Seat",
    "SeatStatus",
    "IdSequence",
]
