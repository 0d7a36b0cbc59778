"""Address business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models import Address
from repositories.address_repository import AddressRepository
from schemas import AddressPayload
from services.crud import delete_or_raise, get_or_raise, update_or_raise


def _to_address(payload: AddressPayload, address_id: str | None = None) -> Address:
    address = Address(
        street=payload.street,
        street2=payload.street2,
        city=payload.city,
        state=payload.state,
        zipcode=payload.zipcode,
        country=payload.country,
    )
    if address_id is not None:
        address.id = address_id
    return address


async def list_addresses(db: AsyncSession) -> list[Address]:
    return await AddressRepository(db).find_all()


async def get_address(db: AsyncSession, address_id: str) -> Address:
    return await get_or_raise(AddressRepository(db), address_id)


async def create_address(db: AsyncSession, payload: AddressPayload) -> Address:
    return await AddressRepository(db).save(_to_address(payload))


async def update_address(
    db: AsyncSession, address_id: str, payload: AddressPayload
) -> Address:
    return await update_or_raise(
        AddressRepository(db), _to_address(payload, address_id)
    )


async def delete_address(db: AsyncSession, address_id: str) -> None:
    """Delete an address; drivers and teams using it keep existing without it."""
    await delete_or_raise(AddressRepository(db), address_id)
