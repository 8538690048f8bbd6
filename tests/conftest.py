import pytest
import pytest_asyncio
from datetime import datetime

from movie_booking.core.config import Settings
from movie_booking.core.database import Database
from tests.utils import seed_schedule


@pytest.fixture
def settings(tmp_path):
    return Settings(DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")


@pytest_asyncio.fixture
async def database(settings):
    """Fresh file-backed SQLite database per test"""
    db = Database(settings.DATABASE_URL)
    await db.create_all()

    yield db

    await db.dispose()


@pytest_asyncio.fixture
async def schedule(database):
    """Small schedule: two theaters, three movies, four shows"""
    await seed_schedule(
        database,
        movies=[(1, "Django"), (2, "Dune 2"), (3, "Interstellar")],
        theaters=[(1, "PVR Cinemas, Pune"), (2, "INOX Mall")],
        screens=[(10, 1), (20, 2)],
        shows=[
            (1, 10, 1, datetime(2026, 1, 1, 18, 0)),
            (2, 10, 2, datetime(2026, 1, 2, 18, 0)),
            (3, 20, 2, datetime(2026, 1, 3, 21, 0)),
            (4, 20, 3, datetime(2026, 1, 5, 12, 0)),
        ],
    )
    return database
