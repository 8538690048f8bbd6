"""
Identifier allocation for application-assigned primary keys

Two strategies share one interface:

- MaxScanAllocator reads MAX(id) inside the caller's transaction and adds one.
  Correctness under concurrency depends on the isolation level; a colliding
  concurrent insert is rejected by the primary key and surfaces as a failed
  transaction.
- SequenceAllocator keeps one counter row per table in `id_sequence` and bumps
  it with an UPDATE, so concurrent transactions serialize on that row lock.

Both must be called with the session that will perform the insert.
"""
import logging
from typing import Dict, List

from sqlalchemy import Table, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from movie_booking.models import IdSequence

logger = logging.getLogger(__name__)

# Largest id assumed for an empty table. Users start at 131 to stay clear of
# historical rows imported into the user table.
DEFAULT_FLOOR = 0
ID_FLOORS: Dict[str, int] = {
    "user": 130,
}


def id_floor(table: Table) -> int:
    return ID_FLOORS.get(table.name, DEFAULT_FLOOR)


async def current_max_id(session: AsyncSession, table: Table, id_column: str) -> int:
    """Current MAX(id_column), or the table's floor when it is empty"""
    column = table.c[id_column]
    result = await session.execute(
        select(func.coalesce(func.max(column), id_floor(table)))
    )
    return int(result.scalar_one())


class IdentifierAllocator:
    """Interface for computing the next unused id of a table"""

    async def next_id(self, session: AsyncSession, table: Table, id_column: str) -> int:
        ids = await self.next_ids(session, table, id_column, 1)
        return ids[0]

    async def next_ids(self, session: AsyncSession, table: Table, id_column: str, count: int) -> List[int]:
        """Allocate `count` consecutive ids"""
        raise NotImplementedError


class MaxScanAllocator(IdentifierAllocator):
    """max + 1, read once per call on the caller's transaction"""

    async def next_ids(self, session: AsyncSession, table: Table, id_column: str, count: int) -> List[int]:
        if count <= 0:
            return []
        current = await current_max_id(session, table, id_column)
        return list(range(current + 1, current + 1 + count))


class SequenceAllocator(IdentifierAllocator):
    """Counter row per table in `id_sequence`, seeded from the table's max on first use"""

    async def next_ids(self, session: AsyncSession, table: Table, id_column: str, count: int) -> List[int]:
        if count <= 0:
            return []

        sequence = IdSequence.__table__
        bump = (
            update(sequence)
            .where(sequence.c.Name == table.name)
            .values(LastValue=sequence.c.LastValue + count)
        )
        result = await session.execute(bump)

        if result.rowcount == 0:
            seed = await current_max_id(session, table, id_column)
            logger.info(f"Seeding id sequence for '{table.name}' at {seed}")
            await session.execute(
                insert(sequence).values(Name=table.name, LastValue=seed + count)
            )
            last_value = seed + count
        else:
            last_value = (
                await session.execute(
                    select(sequence.c.LastValue).where(sequence.c.Name == table.name)
                )
            ).scalar_one()

        return list(range(last_value - count + 1, last_value + 1))


ALLOCATORS = {
    "max_scan": MaxScanAllocator,
    "sequence": SequenceAllocator,
}


def get_allocator(strategy: str) -> IdentifierAllocator:
    """Build the allocator named by ID_ALLOCATION_STRATEGY"""
    try:
        return ALLOCATORS[strategy]()
    except KeyError:
        raise ValueError(f"Unknown id allocation strategy: {strategy}") from None
