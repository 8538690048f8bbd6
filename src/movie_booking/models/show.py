"""
Scheduling reference data: movies, theaters, screens and shows

These tables are read-only from the booking core's point of view.
"""
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from movie_booking.core.database import Base


class Movie(Base):
    __tablename__ = "movie"

    movie_id = Column("MovieID", Integer, primary_key=True, autoincrement=False)
    title = Column("Title", String(255), nullable=False)

    shows = relationship("Show", back_populates="movie")

    def __repr__(self):
        return f"<Movie(id={self.movie_id}, title='{self.title}')>"


class Theater(Base):
    __tablename__ = "theater"

    theater_id = Column("TheaterID", Integer, primary_key=True, autoincrement=False)
    name = Column("Name", String(255), nullable=False)

    screens = relationship("Screen", back_populates="theater")

    def __repr__(self):
        return f"<Theater(id={self.theater_id}, name='{self.name}')>"


class Screen(Base):
    __tablename__ = "screen"

    screen_id = Column("ScreenID", Integer, primary_key=True, autoincrement=False)
    theater_id = Column("TheaterID", Integer, ForeignKey("theater.TheaterID"), nullable=False, index=True)

    theater = relationship("Theater", back_populates="screens")
    shows = relationship("Show", back_populates="screen")

    def __repr__(self):
        return f"<Screen(id={self.screen_id}, theater_id={self.theater_id})>"


class Show(Base):
    __tablename__ = "shows"

    show_id = Column("ShowID", Integer, primary_key=True, autoincrement=False)
    screen_id = Column("ScreenID", Integer, ForeignKey("screen.ScreenID"), nullable=False, index=True)
    movie_id = Column("MovieID", Integer, ForeignKey("movie.MovieID"), nullable=False, index=True)
    show_time = Column("ShowTime", DateTime, nullable=False, index=True)

    movie = relationship("Movie", back_populates="shows")
    screen = relationship("Screen", back_populates="shows")

    def __repr__(self):
        return f"<Show(id={self.show_id}, movie_id={self.movie_id}, screen_id={self.screen_id}, time='{self.show_time}')>"
