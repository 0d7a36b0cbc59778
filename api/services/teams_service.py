"""Team business logic, including driver association.

A team payload names its drivers by id. The ids are resolved to existing
Driver rows before the team is saved so the team_drivers association only
ever references real drivers:

- ids that match no driver are dropped silently
- an empty or missing list leaves the team's current drivers as they are
"""

from collections.abc import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from core.logger import get_logger
from models import Driver, Team
from repositories.driver_repository import DriverRepository
from repositories.team_repository import TeamRepository
from schemas import TeamPayload
from services.crud import delete_or_raise, get_or_raise

logger = get_logger(__name__)


async def resolve_drivers(
    db: AsyncSession, driver_ids: Sequence[str] | None
) -> list[Driver] | None:
    """Load the drivers behind ``driver_ids``.

    Returns None when there is nothing to resolve, so callers can tell
    "leave drivers alone" apart from "no listed driver exists".
    """
    if not driver_ids:
        return None
    drivers = await DriverRepository(db).find_by_ids(list(driver_ids), relations=())
    if len(drivers) != len(set(driver_ids)):
        logger.info(
            "team.drivers.unresolved",
            requested=len(set(driver_ids)),
            resolved=len(drivers),
        )
    return drivers


async def _to_team(
    db: AsyncSession, payload: TeamPayload, team_id: str | None = None
) -> Team:
    team = Team(
        name=payload.name,
        nationality=payload.nationality,
        business_address_id=payload.business_address,
    )
    if team_id is not None:
        team.id = team_id
    drivers = await resolve_drivers(db, payload.drivers)
    if drivers is not None:
        team.drivers = drivers
    return team


async def list_teams(db: AsyncSession) -> list[Team]:
    return await TeamRepository(db).find_all()


async def get_team(db: AsyncSession, team_id: str) -> Team:
    return await get_or_raise(TeamRepository(db), team_id)


async def create_team(db: AsyncSession, payload: TeamPayload) -> Team:
    return await TeamRepository(db).save(await _to_team(db, payload))


async def update_team(db: AsyncSession, team_id: str, payload: TeamPayload) -> Team:
    repo = TeamRepository(db)
    # Existence first, so unknown teams fail before driver lookups run.
    await get_or_raise(repo, team_id, relations=())
    return await repo.save(await _to_team(db, payload, team_id))


async def delete_team(db: AsyncSession, team_id: str) -> None:
    """Delete a team. Its drivers stay; only association rows go."""
    await delete_or_raise(TeamRepository(db), team_id)
