"""Driver business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models import Driver, RaceResult
from repositories.driver_repository import DriverRepository
from repositories.race_result_repository import RaceResultRepository
from schemas import DriverPayload
from services.crud import (
    delete_or_raise,
    ensure_exists,
    get_or_raise,
    update_or_raise,
)


def _to_driver(payload: DriverPayload, driver_id: str | None = None) -> Driver:
    driver = Driver(
        first_name=payload.first_name,
        last_name=payload.last_name,
        nationality=payload.nationality,
        home_address_id=payload.home_address,
        management_address_id=payload.management_address,
    )
    if driver_id is not None:
        driver.id = driver_id
    return driver


async def list_drivers(db: AsyncSession) -> list[Driver]:
    return await DriverRepository(db).find_all()


async def get_driver(db: AsyncSession, driver_id: str) -> Driver:
    return await get_or_raise(DriverRepository(db), driver_id)


async def create_driver(db: AsyncSession, payload: DriverPayload) -> Driver:
    return await DriverRepository(db).save(_to_driver(payload))


async def update_driver(
    db: AsyncSession, driver_id: str, payload: DriverPayload
) -> Driver:
    """Overwrite a driver. Team memberships are managed from the team side."""
    return await update_or_raise(
        DriverRepository(db), _to_driver(payload, driver_id)
    )


async def delete_driver(db: AsyncSession, driver_id: str) -> None:
    await delete_or_raise(DriverRepository(db), driver_id)


async def get_driver_results(db: AsyncSession, driver_id: str) -> list[RaceResult]:
    await ensure_exists(DriverRepository(db), driver_id)
    return await RaceResultRepository(db).find_by_query(driver=driver_id)
