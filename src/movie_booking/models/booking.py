"""
Booking and Payment models - created together, once, by the booking transaction
"""
from enum import Enum as PyEnum
from sqlalchemy import Column, Integer, String, DateTime, Numeric, ForeignKey

from movie_booking.core.database import Base


class PaymentStatus(str, PyEnum):
    """Payment status; no gateway is integrated so every payment completes"""
    COMPLETED = "Completed"


class Booking(Base):
    __tablename__ = "booking"

    booking_id = Column("BookingID", Integer, primary_key=True, autoincrement=False)
    user_id = Column("UserID", Integer, nullable=False, index=True)
    show_id = Column("ShowID", Integer, ForeignKey("shows.ShowID"), nullable=False, index=True)
    booking_date = Column("BookingDate", DateTime, nullable=False, index=True)
    total_seats = Column("TotalSeats", Integer, nullable=False)
    total_price = Column("TotalPrice", Numeric(10, 2), nullable=False)

    def __repr__(self):
        return (f"<Booking(id={self.booking_id}, user_id={self.user_id}, show_id={self.show_id}, "
                f"seats={self.total_seats}, total={self.total_price})>")


class Payment(Base):
    __tablename__ = "payment"

    payment_id = Column("PaymentID", Integer, primary_key=True, autoincrement=False)
    booking_id = Column("BookingID", Integer, ForeignKey("booking.BookingID"), nullable=False, index=True)
    payment_date = Column("PaymentDate", DateTime, nullable=False)
    payment_mode = Column("PaymentMode", String(50), nullable=False)
    payment_status = Column("PaymentStatus", String(50), nullable=False)
    amount_paid = Column("AmountPaid", Numeric(10, 2), nullable=False)

    def __repr__(self):
        return (f"<Payment(id={self.payment_id}, booking_id={self.booking_id}, "
                f"mode='{self.payment_mode}', amount={self.amount_paid})>")
