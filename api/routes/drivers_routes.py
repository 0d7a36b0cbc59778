"""Driver endpoints."""

from fastapi import APIRouter, Response

from core.database import DbSession
from routes.params import EntityIdPath
from schemas import (
    CreatedResponse,
    DriverPayload,
    DriverResponse,
    RaceResultResponse,
)
from services.drivers_service import (
    create_driver,
    delete_driver,
    get_driver,
    get_driver_results,
    list_drivers,
    update_driver,
)

router = APIRouter(prefix="/api/drivers", tags=["drivers"])

_NOT_FOUND = {404: {"description": "Driver not found"}}


@router.get("", response_model=list[DriverResponse])
async def get_drivers(db: DbSession) -> list[DriverResponse]:
    return [DriverResponse.model_validate(d) for d in await list_drivers(db)]


@router.post("", response_model=CreatedResponse, status_code=201)
async def add_driver(body: DriverPayload, db: DbSession) -> CreatedResponse:
    driver = await create_driver(db, body)
    return CreatedResponse(id=driver.id)


@router.get("/{driver_id}", response_model=DriverResponse, responses=_NOT_FOUND)
async def get_driver_by_id(driver_id: EntityIdPath, db: DbSession) -> DriverResponse:
    return DriverResponse.model_validate(await get_driver(db, driver_id))


@router.put("/{driver_id}", status_code=204, responses=_NOT_FOUND)
async def put_driver(
    driver_id: EntityIdPath, body: DriverPayload, db: DbSession
) -> Response:
    await update_driver(db, driver_id, body)
    return Response(status_code=204)


@router.delete("/{driver_id}", status_code=204, responses=_NOT_FOUND)
async def remove_driver(driver_id: EntityIdPath, db: DbSession) -> Response:
    await delete_driver(db, driver_id)
    return Response(status_code=204)


@router.get(
    "/{driver_id}/results",
    response_model=list[RaceResultResponse],
    responses=_NOT_FOUND,
)
async def get_results_for_driver(
    driver_id: EntityIdPath, db: DbSession
) -> list[RaceResultResponse]:
    """All race results for that driver."""
    results = await get_driver_results(db, driver_id)
    return [RaceResultResponse.model_validate(r) for r in results]
