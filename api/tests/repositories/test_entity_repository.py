"""Tests for the shared EntityRepository contract.

Exercised through concrete repositories against in-memory SQLite with
foreign keys enforced.
"""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from models import Address, RaceClass
from repositories.address_repository import AddressRepository
from repositories.class_repository import ClassRepository
from repositories.exceptions import ConstraintViolationError
from repositories.race_repository import RaceRepository
from tests.factories import (
    AddressFactory,
    CarFactory,
    RaceClassFactory,
    RaceFactory,
    create_async,
    create_batch_async,
)

pytestmark = pytest.mark.integration

UNKNOWN_ID = "00000000-0000-4000-8000-000000000000"


class TestSave:
    async def test_insert_assigns_uuid(self, db_session: AsyncSession):
        repo = ClassRepository(db_session)

        saved = await repo.save(RaceClass(name="LMP2"))

        assert saved.id is not None
        assert len(saved.id) == 36

    async def test_round_trip_keeps_fields(self, db_session: AsyncSession):
        repo = AddressRepository(db_session)
        saved = await repo.save(
            Address(
                street="1 Speedway Blvd",
                city="Daytona Beach",
                state="FL",
                zipcode="32114",
                country="USA",
            )
        )

        found = await repo.find_by_id(saved.id)

        assert found is not None
        assert found.street == "1 Speedway Blvd"
        assert found.street2 is None
        assert found.city == "Daytona Beach"
        assert found.country == "USA"

    async def test_save_with_existing_id_overwrites(self, db_session: AsyncSession):
        race_class = await create_async(RaceClassFactory, db_session, name="GTD")
        repo = ClassRepository(db_session)

        await repo.save(RaceClass(id=race_class.id, name="GTD PRO"))
        found = await repo.find_by_id(race_class.id)

        assert found is not None
        assert found.name == "GTD PRO"
        assert len(await repo.find_all()) == 1

    async def test_overwrite_writes_explicit_none_values(
        self, db_session: AsyncSession
    ):
        address = await create_async(AddressFactory, db_session, street2="Suite 9")
        repo = AddressRepository(db_session)

        await repo.save(
            Address(
                id=address.id,
                street=None,
                street2=None,
                city="Sebring",
                state="FL",
                zipcode="33870",
                country="USA",
            )
        )
        found = await repo.find_by_id(address.id)

        assert found is not None
        assert found.street is None
        assert found.street2 is None
        assert found.city == "Sebring"

    async def test_dangling_foreign_key_raises_constraint_violation(
        self, db_session: AsyncSession
    ):
        from models import Car
        from repositories.car_repository import CarRepository

        repo = CarRepository(db_session)

        with pytest.raises(ConstraintViolationError) as exc_info:
            await repo.save(
                Car(make="Ford", model="GT", class_id=UNKNOWN_ID, team_id=UNKNOWN_ID)
            )

        assert exc_info.value.entity == "Car"
        assert exc_info.value.operation == "save"


class TestFind:
    async def test_find_by_id_returns_none_when_missing(
        self, db_session: AsyncSession
    ):
        repo = RaceRepository(db_session)

        assert await repo.find_by_id(UNKNOWN_ID) is None

    async def test_find_all_returns_every_row(self, db_session: AsyncSession):
        await create_batch_async(RaceFactory, db_session, 3)
        repo = RaceRepository(db_session)

        races = await repo.find_all()

        assert len(races) == 3

    async def test_find_all_empty(self, db_session: AsyncSession):
        assert await RaceRepository(db_session).find_all() == []

    async def test_find_by_ids_skips_unknown(self, db_session: AsyncSession):
        races = await create_batch_async(RaceFactory, db_session, 2)
        repo = RaceRepository(db_session)

        found = await repo.find_by_ids([races[0].id, UNKNOWN_ID])

        assert [race.id for race in found] == [races[0].id]

    async def test_find_by_ids_with_no_ids(self, db_session: AsyncSession):
        assert await RaceRepository(db_session).find_by_ids([]) == []


class TestDelete:
    async def test_delete_reports_one_affected(self, db_session: AsyncSession):
        race = await create_async(RaceFactory, db_session)
        race_id = race.id
        repo = RaceRepository(db_session)

        outcome = await repo.delete(race_id)

        assert outcome.affected == 1
        assert outcome.found
        assert await repo.find_by_id(race_id) is None

    async def test_delete_missing_reports_zero(self, db_session: AsyncSession):
        outcome = await RaceRepository(db_session).delete(UNKNOWN_ID)

        assert outcome.affected == 0
        assert not outcome.found

    async def test_delete_referenced_class_raises_constraint_violation(
        self, db_session: AsyncSession
    ):
        car = await create_async(CarFactory, db_session)

        with pytest.raises(ConstraintViolationError) as exc_info:
            await ClassRepository(db_session).delete(car.class_id)

        assert exc_info.value.operation == "delete"
