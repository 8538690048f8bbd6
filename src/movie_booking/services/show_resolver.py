"""
Show Resolver - maps free-text movie/theater input to one scheduled show

Resolution tiers, each tried only when the previous one found nothing:

1. movie title contains the movie query AND theater name contains the
   theater query (separators ignored on both sides)
2. movie title contains the movie query
3. any show

Matching is case-insensitive and literal (LIKE wildcards in the input are
escaped). Case folding and separator stripping run in SQL on both the column
and the bound query, so both sides are normalized by the same functions.
Within a tier the latest ShowTime wins.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import Select, String, func, literal, select
from sqlalchemy.ext.asyncio import AsyncSession

from movie_booking.models import Movie, Screen, Show, Theater
from movie_booking.services.exceptions import NoShowsAvailableError

logger = logging.getLogger(__name__)

MATCH_MOVIE_AND_THEATER = "movie_and_theater"
MATCH_MOVIE = "movie"
MATCH_FALLBACK = "fallback"

# Removed from theater names and theater queries before comparing
THEATER_SEPARATORS = (",", " ", "\t", "\n", "\r", "\v", "\f", "\u00a0")

LIKE_ESCAPE = "/"


@dataclass(frozen=True)
class ResolvedShow:
    show_id: int
    screen_id: int
    movie_title: str
    theater_name: str
    show_time: datetime
    match: str


def escape_like(value: str) -> str:
    """Make %, _ and the escape character match literally"""
    for char in (LIKE_ESCAPE, "%", "_"):
        value = value.replace(char, LIKE_ESCAPE + char)
    return value


def has_theater_key(theater_query: str) -> bool:
    """True when something is left after removing separators"""
    return any(char not in THEATER_SEPARATORS for char in theater_query)


def _strip_separators(expr):
    for separator in THEATER_SEPARATORS:
        expr = func.replace(expr, separator, "")
    return expr


def _upper(expr):
    return func.upper(expr, type_=String)


def _bind(query: str):
    return literal(escape_like(query), String)


def _contains(column, query_expr):
    """Case-insensitive literal substring test, folded by the database on both sides"""
    return _upper(column).contains(_upper(query_expr), escape=LIKE_ESCAPE)


class ShowResolver:
    """Best-effort show lookup used inside the booking transaction"""

    @staticmethod
    def _base_query() -> Select:
        return (
            select(
                Show.show_id,
                Show.screen_id,
                Movie.title,
                Theater.name,
                Show.show_time,
            )
            .join(Movie, Movie.movie_id == Show.movie_id)
            .join(Screen, Screen.screen_id == Show.screen_id)
            .join(Theater, Theater.theater_id == Screen.theater_id)
            .order_by(Show.show_time.desc(), Show.show_id.desc())
            .limit(1)
        )

    @staticmethod
    def _movie_filter(movie_query: str):
        return _contains(Movie.title, _bind(movie_query))

    @staticmethod
    def _theater_filter(theater_query: str):
        return _contains(_strip_separators(Theater.name), _strip_separators(_bind(theater_query)))

    async def _first(self, session: AsyncSession, query: Select, match: str) -> Optional[ResolvedShow]:
        row = (await session.execute(query)).first()
        if row is None:
            return None
        return ResolvedShow(
            show_id=row[0],
            screen_id=row[1],
            movie_title=row[2],
            theater_name=row[3],
            show_time=row[4],
            match=match,
        )

    async def resolve_show(
        self,
        session: AsyncSession,
        movie_query: Optional[str],
        theater_query: Optional[str] = None,
    ) -> ResolvedShow:
        """
        Resolve the best matching show.

        Args:
            session: Session of the enclosing booking transaction
            movie_query: Free-text movie title (already alias-normalized by the caller)
            theater_query: Free-text theater name, may be empty

        Returns:
            The resolved show

        Raises:
            NoShowsAvailableError: If there are no shows at all
        """
        movie_query = (movie_query or "").strip()
        theater_query = (theater_query or "").strip()

        show = None

        if movie_query and has_theater_key(theater_query):
            query = self._base_query().where(
                self._movie_filter(movie_query),
                self._theater_filter(theater_query),
            )
            show = await self._first(session, query, MATCH_MOVIE_AND_THEATER)

        if show is None and movie_query:
            query = self._base_query().where(self._movie_filter(movie_query))
            show = await self._first(session, query, MATCH_MOVIE)

        if show is None:
            show = await self._first(session, self._base_query(), MATCH_FALLBACK)

        if show is None:
            raise NoShowsAvailableError("No show records are available to create booking.")

        logger.info(
            f"Resolved show {show.show_id} ({show.match}) for movie={movie_query!r} theater={theater_query!r}",
            extra={"show_id": show.show_id},
        )
        return show
