"""Race endpoints, including race results nested under a race."""

from fastapi import APIRouter, Response

from core.database import DbSession
from routes.params import EntityIdPath
from schemas import (
    CreatedResponse,
    RaceCreatePayload,
    RacePayload,
    RaceResponse,
    RaceResultResponse,
    RaceResultsBatch,
)
from services.races_service import (
    append_race_results,
    create_race_with_results,
    delete_race,
    get_race,
    get_race_results,
    list_races,
    update_race,
)

router = APIRouter(prefix="/api/races", tags=["races"])

_NOT_FOUND = {404: {"description": "Race not found"}}


@router.get("", response_model=list[RaceResponse])
async def get_races(db: DbSession) -> list[RaceResponse]:
    return [RaceResponse.model_validate(r) for r in await list_races(db)]


@router.post(
    "",
    response_model=CreatedResponse,
    status_code=201,
    responses={400: {"description": "A race result violated a constraint"}},
)
async def add_race(body: RaceCreatePayload, db: DbSession) -> CreatedResponse:
    """Add a race, optionally together with its results."""
    race = await create_race_with_results(db, body)
    return CreatedResponse(id=race.id)


@router.get("/{race_id}", response_model=RaceResponse, responses=_NOT_FOUND)
async def get_race_by_id(race_id: EntityIdPath, db: DbSession) -> RaceResponse:
    return RaceResponse.model_validate(await get_race(db, race_id))


@router.put("/{race_id}", status_code=204, responses=_NOT_FOUND)
async def put_race(race_id: EntityIdPath, body: RacePayload, db: DbSession) -> Response:
    await update_race(db, race_id, body)
    return Response(status_code=204)


@router.delete("/{race_id}", status_code=204, responses=_NOT_FOUND)
async def remove_race(race_id: EntityIdPath, db: DbSession) -> Response:
    await delete_race(db, race_id)
    return Response(status_code=204)


@router.get(
    "/{race_id}/results",
    response_model=list[RaceResultResponse],
    responses=_NOT_FOUND,
)
async def get_results_for_race(
    race_id: EntityIdPath, db: DbSession
) -> list[RaceResultResponse]:
    """All race results for that race."""
    results = await get_race_results(db, race_id)
    return [RaceResultResponse.model_validate(r) for r in results]


@router.post("/{race_id}/results", status_code=201, responses=_NOT_FOUND)
async def add_results_for_race(
    race_id: EntityIdPath, body: RaceResultsBatch, db: DbSession
) -> Response:
    """Add race results for that race.

    Rows are written one by one; on a failing row the earlier rows stay.
    """
    await append_race_results(db, race_id, body.race_results)
    return Response(status_code=201)
