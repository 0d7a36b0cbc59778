"""Shared not-found handling on top of the entity repositories.

Repositories report a missing row as None or a zero-count DeletionOutcome;
these helpers turn that into EntityNotFoundError for the operations where a
missing row is a failure (update, delete, nested lookups).
"""

from typing import TypeVar

from repositories.base import EntityRepository
from repositories.relations import RelationPolicy

T = TypeVar("T")


class EntityNotFoundError(Exception):
    """No row of ``entity`` has the given id."""

    def __init__(self, entity: str, entity_id: str):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} {entity_id} not found")


async def get_or_raise(
    repo: EntityRepository[T],
    entity_id: str,
    relations: RelationPolicy | None = None,
) -> T:
    entity = await repo.find_by_id(entity_id, relations=relations)
    if entity is None:
        raise EntityNotFoundError(repo.entity_name, entity_id)
    return entity


async def ensure_exists(repo: EntityRepository, entity_id: str) -> None:
    """Raise EntityNotFoundError unless the bare row exists."""
    await get_or_raise(repo, entity_id, relations=())


async def update_or_raise(repo: EntityRepository[T], entity: T) -> T:
    """Overwrite an existing row. The entity must carry its id."""
    await ensure_exists(repo, entity.id)
    return await repo.save(entity)


async def delete_or_raise(repo: EntityRepository, entity_id: str) -> None:
    outcome = await repo.delete(entity_id)
    if not outcome.found:
        raise EntityNotFoundError(repo.entity_name, entity_id)
