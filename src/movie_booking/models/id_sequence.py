"""
IdSequence model - backing rows for the sequence identifier allocator
"""
from sqlalchemy import Column, Integer, String

from movie_booking.core.database import Base


class IdSequence(Base):
    __tablename__ = "id_sequence"

    name = Column("Name", String(100), primary_key=True)  # allocated table name
    last_value = Column("LastValue", Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<IdSequence(name='{self.name}', last_value={self.last_value})>"
