"""Tests for team driver resolution and team writes."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from models import Nationality
from schemas import TeamPayload
from services.crud import EntityNotFoundError
from services.drivers_service import get_driver
from services.teams_service import (
    create_team,
    delete_team,
    get_team,
    resolve_drivers,
    update_team,
)
from tests.factories import DriverFactory, create_async

pytestmark = pytest.mark.integration

UNKNOWN_ID = "00000000-0000-4000-8000-000000000000"


class TestResolveDrivers:
    async def test_none_and_empty_mean_untouched(self, db_session: AsyncSession):
        assert await resolve_drivers(db_session, None) is None
        assert await resolve_drivers(db_session, []) is None

    async def test_every_existing_id_resolves(self, db_session: AsyncSession):
        first = await create_async(DriverFactory, db_session)
        second = await create_async(DriverFactory, db_session)

        drivers = await resolve_drivers(db_session, [first.id, second.id])

        assert drivers is not None
        assert {d.id for d in drivers} == {first.id, second.id}
        assert len(drivers) == 2

    async def test_unknown_ids_are_dropped(self, db_session: AsyncSession):
        driver = await create_async(DriverFactory, db_session)

        drivers = await resolve_drivers(db_session, [driver.id, UNKNOWN_ID])

        assert drivers is not None
        assert [d.id for d in drivers] == [driver.id]

    async def test_all_unknown_resolves_to_empty_list(
        self, db_session: AsyncSession
    ):
        assert await resolve_drivers(db_session, [UNKNOWN_ID]) == []


class TestTeamWrites:
    async def test_create_with_drivers(self, db_session: AsyncSession):
        driver = await create_async(DriverFactory, db_session)
        payload = TeamPayload(
            name="Wright Motorsports",
            nationality=Nationality.USA,
            drivers=[driver.id, UNKNOWN_ID],
        )

        team = await create_team(db_session, payload)
        found = await get_team(db_session, team.id)

        assert found.name == "Wright Motorsports"
        assert [d.id for d in found.drivers] == [driver.id]

    async def test_update_without_drivers_keeps_membership(
        self, db_session: AsyncSession
    ):
        driver = await create_async(DriverFactory, db_session)
        team = await create_team(
            db_session,
            TeamPayload(name="Old", nationality=Nationality.USA, drivers=[driver.id]),
        )

        await update_team(
            db_session,
            team.id,
            TeamPayload(name="New", nationality=Nationality.VIET_NAM),
        )
        found = await get_team(db_session, team.id)

        assert found.name == "New"
        assert found.nationality == Nationality.VIET_NAM
        assert [d.id for d in found.drivers] == [driver.id]

    async def test_update_replaces_drivers(self, db_session: AsyncSession):
        first = await create_async(DriverFactory, db_session)
        second = await create_async(DriverFactory, db_session)
        team = await create_team(
            db_session,
            TeamPayload(name="Team", nationality=Nationality.USA, drivers=[first.id]),
        )

        await update_team(
            db_session,
            team.id,
            TeamPayload(name="Team", nationality=Nationality.USA, drivers=[second.id]),
        )
        found = await get_team(db_session, team.id)

        assert [d.id for d in found.drivers] == [second.id]

    async def test_update_unknown_team(self, db_session: AsyncSession):
        with pytest.raises(EntityNotFoundError):
            await update_team(
                db_session,
                UNKNOWN_ID,
                TeamPayload(name="Ghost", nationality=Nationality.USA),
            )

    async def test_delete_leaves_drivers(self, db_session: AsyncSession):
        driver = await create_async(DriverFactory, db_session)
        driver_id = driver.id
        team = await create_team(
            db_session,
            TeamPayload(name="Gone", nationality=Nationality.USA, drivers=[driver_id]),
        )

        await delete_team(db_session, team.id)

        with pytest.raises(EntityNotFoundError):
            await get_team(db_session, team.id)
        assert (await get_driver(db_session, driver_id)).teams == []
