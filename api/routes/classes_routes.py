"""Race class endpoints."""

from fastapi import APIRouter, Response

from core.database import DbSession
from routes.params import EntityIdPath
from schemas import ClassPayload, ClassResponse, CreatedResponse
from services.classes_service import (
    create_class,
    delete_class,
    get_class,
    list_classes,
    update_class,
)

router = APIRouter(prefix="/api/classes", tags=["classes"])

_NOT_FOUND = {404: {"description": "Class not found"}}


@router.get("", response_model=list[ClassResponse])
async def get_classes(db: DbSession) -> list[ClassResponse]:
    return [ClassResponse.model_validate(c) for c in await list_classes(db)]


@router.post("", response_model=CreatedResponse, status_code=201)
async def add_class(body: ClassPayload, db: DbSession) -> CreatedResponse:
    race_class = await create_class(db, body)
    return CreatedResponse(id=race_class.id)


@router.get("/{class_id}", response_model=ClassResponse, responses=_NOT_FOUND)
async def get_class_by_id(class_id: EntityIdPath, db: DbSession) -> ClassResponse:
    return ClassResponse.model_validate(await get_class(db, class_id))


@router.put("/{class_id}", status_code=204, responses=_NOT_FOUND)
async def put_class(
    class_id: EntityIdPath, body: ClassPayload, db: DbSession
) -> Response:
    await update_class(db, class_id, body)
    return Response(status_code=204)


@router.delete("/{class_id}", status_code=204, responses=_NOT_FOUND)
async def remove_class(class_id: EntityIdPath, db: DbSession) -> Response:
    await delete_class(db, class_id)
    return Response(status_code=204)
