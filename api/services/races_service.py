"""Race business logic and race/result aggregate writes.

A race and its results are written as separate units of work: the race row
is committed first, then every result is committed on its own, in input
order. When result N fails (for example a duplicate car/race/driver), only
that row is rolled back. The race and results 1..N-1 stay persisted, results
after N are not attempted, and the error propagates to the caller.
"""

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from core.logger import get_logger
from models import Race, RaceResult
from repositories.exceptions import RepositoryError
from repositories.race_repository import RaceRepository
from repositories.race_result_repository import RaceResultRepository
from schemas import RaceCreatePayload, RacePayload, RaceResultPayload
from services.crud import (
    delete_or_raise,
    ensure_exists,
    get_or_raise,
    update_or_raise,
)
from services.race_results_service import build_race_result

logger = get_logger(__name__)


async def _persist_results(
    db: AsyncSession, race_id: str, payloads: Sequence[RaceResultPayload]
) -> list[RaceResult]:
    repo = RaceResultRepository(db)
    saved: list[RaceResult] = []
    for position, payload in enumerate(payloads):
        try:
            race_result = await repo.save(build_race_result(payload, race_id))
            await db.commit()
        except RepositoryError:
            await db.rollback()
            logger.warning(
                "race.results.batch_stopped",
                race_id=race_id,
                failed_index=position,
                persisted=len(saved),
            )
            raise
        saved.append(race_result)
    return saved


async def create_race_with_results(
    db: AsyncSession, payload: RaceCreatePayload
) -> Race:
    """Create a race, then each embedded result stamped with the new race id."""
    race = await RaceRepository(db).save(Race(name=payload.name))
    await db.commit()

    results = payload.race_results or []
    if results:
        await _persist_results(db, race.id, results)

    logger.info("race.created", race_id=race.id, result_count=len(results))
    return race


async def append_race_results(
    db: AsyncSession, race_id: str, payloads: Sequence[RaceResultPayload]
) -> list[RaceResult]:
    """Add results to an existing race.

    Raises EntityNotFoundError before anything is written when the race
    does not exist.
    """
    await ensure_exists(RaceRepository(db), race_id)
    saved = await _persist_results(db, race_id, payloads)
    logger.info("race.results.appended", race_id=race_id, result_count=len(saved))
    return saved


async def get_race_results(db: AsyncSession, race_id: str) -> list[RaceResult]:
    await ensure_exists(RaceRepository(db), race_id)
    return await RaceResultRepository(db).find_by_query(race=race_id)


async def list_races(db: AsyncSession) -> list[Race]:
    return await RaceRepository(db).find_all()


async def get_race(db: AsyncSession, race_id: str) -> Race:
    return await get_or_raise(RaceRepository(db), race_id)


async def update_race(db: AsyncSession, race_id: str, payload: RacePayload) -> Race:
    race = Race(id=race_id, name=payload.name)
    return await update_or_raise(RaceRepository(db), race)


async def delete_race(db: AsyncSession, race_id: str) -> None:
    """Delete a race. Fails with ConstraintViolationError while results exist."""
    await delete_or_raise(RaceRepository(db), race_id)
