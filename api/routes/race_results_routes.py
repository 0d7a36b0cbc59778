"""Race result endpoints (results are created through /api/races)."""

from fastapi import APIRouter, Response

from core.database import DbSession
from routes.params import EntityIdPath
from schemas import RaceResultPayload, RaceResultResponse
from services.race_results_service import (
    delete_race_result,
    get_race_result,
    update_race_result,
)

router = APIRouter(prefix="/api/race-results", tags=["race-results"])

_NOT_FOUND = {404: {"description": "Race result not found"}}


@router.get(
    "/{result_id}", response_model=RaceResultResponse, responses=_NOT_FOUND
)
async def get_race_result_by_id(
    result_id: EntityIdPath, db: DbSession
) -> RaceResultResponse:
    return RaceResultResponse.model_validate(await get_race_result(db, result_id))


@router.put("/{result_id}", status_code=204, responses=_NOT_FOUND)
async def put_race_result(
    result_id: EntityIdPath, body: RaceResultPayload, db: DbSession
) -> Response:
    await update_race_result(db, result_id, body)
    return Response(status_code=204)


@router.delete("/{result_id}", status_code=204, responses=_NOT_FOUND)
async def remove_race_result(result_id: EntityIdPath, db: DbSession) -> Response:
    await delete_race_result(db, result_id)
    return Response(status_code=204)
