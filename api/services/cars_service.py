"""Car business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models import Car, RaceResult
from repositories.car_repository import CarRepository
from repositories.race_result_repository import RaceResultRepository
from schemas import CarPayload
from services.crud import (
    delete_or_raise,
    ensure_exists,
    get_or_raise,
    update_or_raise,
)


def _to_car(payload: CarPayload, car_id: str | None = None) -> Car:
    car = Car(
        make=payload.make,
        model=payload.model,
        class_id=payload.class_,
        team_id=payload.team,
    )
    if car_id is not None:
        car.id = car_id
    return car


async def list_cars(
    db: AsyncSession, make: str | None = None, model: str | None = None
) -> list[Car]:
    """List cars, optionally narrowed by make/model substrings."""
    return await CarRepository(db).find_all_by_query(make=make, model=model)


async def get_car(db: AsyncSession, car_id: str) -> Car:
    return await get_or_raise(CarRepository(db), car_id)


async def create_car(db: AsyncSession, payload: CarPayload) -> Car:
    return await CarRepository(db).save(_to_car(payload))


async def update_car(db: AsyncSession, car_id: str, payload: CarPayload) -> Car:
    return await update_or_raise(CarRepository(db), _to_car(payload, car_id))


async def delete_car(db: AsyncSession, car_id: str) -> None:
    await delete_or_raise(CarRepository(db), car_id)


async def get_car_results(db: AsyncSession, car_id: str) -> list[RaceResult]:
    """All race results for a car. Raises EntityNotFoundError for an unknown car."""
    await ensure_exists(CarRepository(db), car_id)
    return await RaceResultRepository(db).find_by_query(car=car_id)
