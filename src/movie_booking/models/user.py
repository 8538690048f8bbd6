"""
User model - only the identifier is used by the booking core
"""
from sqlalchemy import Column, Integer, String

from movie_booking.core.database import Base


class User(Base):
    __tablename__ = "user"

    # Ids are allocated by the application, never by the store
    user_id = Column("UserID", Integer, primary_key=True, autoincrement=False)
    name = Column("Name", String(255), nullable=False)
    email = Column("Email", String(255), nullable=False, unique=True)
    password = Column("Password", String(255), nullable=False)

    def __repr__(self):
        return f"<User(id={self.user_id}, email='{self.email}')>"
