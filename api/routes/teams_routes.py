"""Team endpoints."""

from fastapi import APIRouter, Response

from core.database import DbSession
from routes.params import EntityIdPath
from schemas import CreatedResponse, TeamPayload, TeamResponse
from services.teams_service import (
    create_team,
    delete_team,
    get_team,
    list_teams,
    update_team,
)

router = APIRouter(prefix="/api/teams", tags=["teams"])

_NOT_FOUND = {404: {"description": "Team not found"}}


@router.get("", response_model=list[TeamResponse])
async def get_teams(db: DbSession) -> list[TeamResponse]:
    return [TeamResponse.model_validate(t) for t in await list_teams(db)]


@router.post("", response_model=CreatedResponse, status_code=201)
async def add_team(body: TeamPayload, db: DbSession) -> CreatedResponse:
    team = await create_team(db, body)
    return CreatedResponse(id=team.id)


@router.get("/{team_id}", response_model=TeamResponse, responses=_NOT_FOUND)
async def get_team_by_id(team_id: EntityIdPath, db: DbSession) -> TeamResponse:
    return TeamResponse.model_validate(await get_team(db, team_id))


@router.put("/{team_id}", status_code=204, responses=_NOT_FOUND)
async def put_team(team_id: EntityIdPath, body: TeamPayload, db: DbSession) -> Response:
    await update_team(db, team_id, body)
    return Response(status_code=204)


@router.delete("/{team_id}", status_code=204, responses=_NOT_FOUND)
async def remove_team(team_id: EntityIdPath, db: DbSession) -> Response:
    await delete_team(db, team_id)
    return Response(status_code=204)
