"""
Seat model - one row per purchased seat
"""
from enum import Enum as PyEnum
from sqlalchemy import Column, Integer, String, ForeignKey

from movie_booking.core.database import Base


class SeatStatus(str, PyEnum):
    """Enum for seat status"""
    BOOKED = "Booked"


class Seat(Base):
    __tablename__ = "seat"

    seat_id = Column("SeatID", Integer, primary_key=True, autoincrement=False)
    seat_number = Column("SeatNumber", String(20), nullable=False)  # 'A1', 'C12'
    booking_id = Column("BookingID", Integer, ForeignKey("booking.BookingID"), nullable=False, index=True)
    screen_id = Column("ScreenID", Integer, ForeignKey("screen.ScreenID"), nullable=False)
    status = Column("Status", String(20), nullable=False, default=SeatStatus.BOOKED.value)

    def __repr__(self):
        return (f"<Seat(id={self.seat_id}, number='{self.seat_number}', "
                f"booking_id={self.booking_id}, status='{self.status}')>")
