"""Address endpoints."""

from fastapi import APIRouter, Response

from core.database import DbSession
from routes.params import EntityIdPath
from schemas import AddressPayload, AddressResponse, CreatedResponse
from services.addresses_service import (
    create_address,
    delete_address,
    get_address,
    list_addresses,
    update_address,
)

router = APIRouter(prefix="/api/addresses", tags=["addresses"])

_NOT_FOUND = {404: {"description": "Address not found"}}


@router.get("", response_model=list[AddressResponse])
async def get_addresses(db: DbSession) -> list[AddressResponse]:
    addresses = await list_addresses(db)
    return [AddressResponse.model_validate(a) for a in addresses]


@router.post("", response_model=CreatedResponse, status_code=201)
async def add_address(body: AddressPayload, db: DbSession) -> CreatedResponse:
    address = await create_address(db, body)
    return CreatedResponse(id=address.id)


@router.get("/{address_id}", response_model=AddressResponse, responses=_NOT_FOUND)
async def get_address_by_id(address_id: EntityIdPath, db: DbSession) -> AddressResponse:
    return AddressResponse.model_validate(await get_address(db, address_id))


@router.put("/{address_id}", status_code=204, responses=_NOT_FOUND)
async def put_address(
    address_id: EntityIdPath, body: AddressPayload, db: DbSession
) -> Response:
    await update_address(db, address_id, body)
    return Response(status_code=204)


@router.delete("/{address_id}", status_code=204, responses=_NOT_FOUND)
async def remove_address(address_id: EntityIdPath, db: DbSession) -> Response:
    await delete_address(db, address_id)
    return Response(status_code=204)
