"""Race class business logic."""

from sqlalchemy.ext.asyncio import AsyncSession

from models import RaceClass
from repositories.class_repository import ClassRepository
from schemas import ClassPayload
from services.crud import delete_or_raise, get_or_raise, update_or_raise


def _to_class(payload: ClassPayload, class_id: str | None = None) -> RaceClass:
    race_class = RaceClass(name=payload.name)
    if class_id is not None:
        race_class.id = class_id
    return race_class


async def list_classes(db: AsyncSession) -> list[RaceClass]:
    return await ClassRepository(db).find_all()


async def get_class(db: AsyncSession, class_id: str) -> RaceClass:
    return await get_or_raise(ClassRepository(db), class_id)


async def create_class(db: AsyncSession, payload: ClassPayload) -> RaceClass:
    return await ClassRepository(db).save(_to_class(payload))


async def update_class(
    db: AsyncSession, class_id: str, payload: ClassPayload
) -> RaceClass:
    return await update_or_raise(ClassRepository(db), _to_class(payload, class_id))


async def delete_class(db: AsyncSession, class_id: str) -> None:
    await delete_or_raise(ClassRepository(db), class_id)
