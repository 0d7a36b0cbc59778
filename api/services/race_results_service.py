"""Race result business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models import RaceResult
from repositories.race_result_repository import RaceResultRepository
from schemas import RaceResultPayload
from services.crud import delete_or_raise, get_or_raise


def build_race_result(
    payload: RaceResultPayload, race_id: str, result_id: str | None = None
) -> RaceResult:
    """Map a payload onto a RaceResult stamped with its race."""
    race_result = RaceResult(
        race_id=race_id,
        car_id=payload.car,
        driver_id=payload.driver,
        class_id=payload.class_,
        race_number=payload.race_number,
        start_position=payload.start_position,
        finish_position=payload.finish_position,
    )
    if result_id is not None:
        race_result.id = result_id
    return race_result


async def get_race_result(db: AsyncSession, result_id: str) -> RaceResult:
    return await get_or_raise(RaceResultRepository(db), result_id)


async def update_race_result(
    db: AsyncSession, result_id: str, payload: RaceResultPayload
) -> RaceResult:
    """Overwrite a result. The result stays attached to its current race."""
    repo = RaceResultRepository(db)
    existing = await get_or_raise(repo, result_id, relations=())
    return await repo.save(build_race_result(payload, existing.race_id, result_id))


async def delete_race_result(db: AsyncSession, result_id: str) -> None:
    await delete_or_raise(RaceResultRepository(db), result_id)
