"""Car endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query, Response

from core.database import DbSession
from routes.params import EntityIdPath
from schemas import (
    CarPayload,
    CarQuery,
    CarResponse,
    CreatedResponse,
    RaceResultResponse,
)
from services.cars_service import (
    create_car,
    delete_car,
    get_car,
    get_car_results,
    list_cars,
    update_car,
)

router = APIRouter(prefix="/api/cars", tags=["cars"])

_NOT_FOUND = {404: {"description": "Car not found"}}


@router.get("", response_model=list[CarResponse])
async def get_cars(
    query: Annotated[CarQuery, Query()], db: DbSession
) -> list[CarResponse]:
    """List cars whose make and/or model contain the given text."""
    cars = await list_cars(db, make=query.make, model=query.model)
    return [CarResponse.model_validate(car) for car in cars]


@router.post("", response_model=CreatedResponse, status_code=201)
async def add_car(body: CarPayload, db: DbSession) -> CreatedResponse:
    car = await create_car(db, body)
    return CreatedResponse(id=car.id)


@router.get("/{car_id}", response_model=CarResponse, responses=_NOT_FOUND)
async def get_car_by_id(car_id: EntityIdPath, db: DbSession) -> CarResponse:
    return CarResponse.model_validate(await get_car(db, car_id))


@router.put("/{car_id}", status_code=204, responses=_NOT_FOUND)
async def put_car(car_id: EntityIdPath, body: CarPayload, db: DbSession) -> Response:
    await update_car(db, car_id, body)
    return Response(status_code=204)


@router.delete("/{car_id}", status_code=204, responses=_NOT_FOUND)
async def remove_car(car_id: EntityIdPath, db: DbSession) -> Response:
    await delete_car(db, car_id)
    return Response(status_code=204)


@router.get(
    "/{car_id}/results",
    response_model=list[RaceResultResponse],
    responses=_NOT_FOUND,
)
async def get_results_for_car(
    car_id: EntityIdPath, db: DbSession
) -> list[RaceResultResponse]:
    """All race results for that car."""
    results = await get_car_results(db, car_id)
    return [RaceResultResponse.model_validate(r) for r in results]
