"""Tests for race aggregate writes.

Results are committed one at a time, so a failure part-way through leaves
the race and the results before it in place.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from repositories.exceptions import ConstraintViolationError
from repositories.race_repository import RaceRepository
from repositories.race_result_repository import RaceResultRepository
from schemas import RaceCreatePayload, RaceResultPayload
from services.crud import EntityNotFoundError
from services.races_service import (
    append_race_results,
    create_race_with_results,
    delete_race,
    get_race_results,
)
from tests.factories import (
    CarFactory,
    DriverFactory,
    RaceClassFactory,
    RaceFactory,
    create_async,
)

pytestmark = pytest.mark.integration

UNKNOWN_ID = "00000000-0000-4000-8000-000000000000"


@pytest.fixture
async def grid(db_session: AsyncSession) -> dict[str, str]:
    """Ids of a class, two cars and two drivers, committed."""
    race_class = await create_async(RaceClassFactory, db_session)
    car_a = await create_async(CarFactory, db_session, class_=race_class)
    car_b = await create_async(CarFactory, db_session, class_=race_class)
    driver_a = await create_async(DriverFactory, db_session)
    driver_b = await create_async(DriverFactory, db_session)
    ids = {
        "class": race_class.id,
        "car_a": car_a.id,
        "car_b": car_b.id,
        "driver_a": driver_a.id,
        "driver_b": driver_b.id,
    }
    await db_session.commit()
    return ids


def _result(grid: dict[str, str], car: str, driver: str, start: int):
    return RaceResultPayload(
        car=grid[car],
        driver=grid[driver],
        class_=grid["class"],
        race_number=str(start),
        start_position=start,
    )


class TestCreateRaceWithResults:
    async def test_creates_race_and_results(
        self, db_session: AsyncSession, grid: dict[str, str]
    ):
        payload = RaceCreatePayload(
            name="12 Hours of Sebring",
            race_results=[
                _result(grid, "car_a", "driver_a", 1),
                _result(grid, "car_b", "driver_b", 2),
            ],
        )

        race = await create_race_with_results(db_session, payload)
        results = await get_race_results(db_session, race.id)

        assert race.name == "12 Hours of Sebring"
        assert {r.start_position for r in results} == {1, 2}
        assert all(r.race_id == race.id for r in results)
        assert all(r.finish_position is None for r in results)

    async def test_creates_race_without_results(self, db_session: AsyncSession):
        race = await create_race_with_results(
            db_session, RaceCreatePayload(name="Petit Le Mans")
        )

        assert await get_race_results(db_session, race.id) == []

    async def test_failing_result_keeps_race_and_earlier_results(
        self, db_session: AsyncSession, grid: dict[str, str]
    ):
        payload = RaceCreatePayload(
            name="Rolex 24",
            race_results=[
                _result(grid, "car_a", "driver_a", 1),
                _result(grid, "car_a", "driver_a", 2),  # duplicate entry
                _result(grid, "car_b", "driver_b", 3),
            ],
        )

        with pytest.raises(ConstraintViolationError):
            await create_race_with_results(db_session, payload)

        [race] = await RaceRepository(db_session).find_all()
        results = await RaceResultRepository(db_session).find_by_query(race=race.id)
        assert race.name == "Rolex 24"
        assert [r.start_position for r in results] == [1]


class TestAppendRaceResults:
    async def test_appends_to_existing_race(
        self, db_session: AsyncSession, grid: dict[str, str]
    ):
        race = await create_async(RaceFactory, db_session)
        race_id = race.id
        await db_session.commit()

        saved = await append_race_results(
            db_session, race_id, [_result(grid, "car_a", "driver_a", 4)]
        )

        assert len(saved) == 1
        assert saved[0].race_id == race_id

    async def test_unknown_race_writes_nothing(
        self, db_session: AsyncSession, grid: dict[str, str]
    ):
        with pytest.raises(EntityNotFoundError):
            await append_race_results(
                db_session, UNKNOWN_ID, [_result(grid, "car_a", "driver_a", 1)]
            )

        assert await RaceResultRepository(db_session).find_by_query() == []

    async def test_duplicate_of_stored_result_stops_batch(
        self, db_session: AsyncSession, grid: dict[str, str]
    ):
        race = await create_race_with_results(
            db_session,
            RaceCreatePayload(
                name="Road America",
                race_results=[_result(grid, "car_a", "driver_a", 1)],
            ),
        )
        race_id = race.id

        with pytest.raises(ConstraintViolationError):
            await append_race_results(
                db_session,
                race_id,
                [
                    _result(grid, "car_b", "driver_b", 2),
                    _result(grid, "car_a", "driver_a", 3),
                    _result(grid, "car_b", "driver_a", 4),
                ],
            )

        results = await RaceResultRepository(db_session).find_by_query(race=race_id)
        assert sorted(r.start_position for r in results) == [1, 2]


class TestRaceLookups:
    async def test_results_of_unknown_race(self, db_session: AsyncSession):
        with pytest.raises(EntityNotFoundError):
            await get_race_results(db_session, UNKNOWN_ID)

    async def test_delete_unknown_race(self, db_session: AsyncSession):
        with pytest.raises(EntityNotFoundError) as exc_info:
            await delete_race(db_session, UNKNOWN_ID)

        assert exc_info.value.entity == "Race"
        assert exc_info.value.entity_id == UNKNOWN_ID
