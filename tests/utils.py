"""Helpers shared by the test modules"""
from sqlalchemy import func, select

from movie_booking.models import Movie, Screen, Show, Theater


async def seed_schedule(database, movies=(), theaters=(), screens=(), shows=()):
    """
    Insert reference data.

    movies: (MovieID, Title)
    theaters: (TheaterID, Name)
    screens: (ScreenID, TheaterID)
    shows: (ShowID, ScreenID, MovieID, ShowTime)
    """
    async with database.session() as session:
        async with session.begin():
            session.add_all([Movie(movie_id=i, title=t) for i, t in movies])
            session.add_all([Theater(theater_id=i, name=n) for i, n in theaters])
            session.add_all([Screen(screen_id=i, theater_id=t) for i, t in screens])
            session.add_all([
                Show(show_id=i, screen_id=sc, movie_id=m, show_time=when)
                for i, sc, m, when in shows
            ])


async def count_rows(database, model, *criteria) -> int:
    async with database.session() as session:
        query = select(func.count()).select_from(model)
        if criteria:
            query = query.where(*criteria)
        return (await session.execute(query)).scalar_one()
