"""Generic persistence gateway shared by every entity repository."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Generic, TypeVar

from sqlalchemy import Select, delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import Base
from repositories.exceptions import ConstraintViolationError
from repositories.relations import RelationPolicy, loader_options
from repositories.utils import log_slow_query

ModelT = TypeVar("ModelT", bound=Base)


@dataclass(frozen=True)
class DeletionOutcome:
    """Result of a delete. ``affected == 0`` means nothing matched."""

    affected: int

    @property
    def found(self) -> bool:
        return self.affected > 0


class EntityRepository(Generic[ModelT]):
    """CRUD operations for one mapped entity.

    Subclasses set ``model`` and the ``relations`` policy loaded on reads.
    Every read accepts ``relations`` to override the policy for that call.
    Nothing here commits: the caller owns the transaction.
    """

    model: type[ModelT]
    relations: RelationPolicy = ()

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def entity_name(self) -> str:
        return self.model.__name__

    def _select(self, relations: RelationPolicy | None = None) -> Select:
        policy = self.relations if relations is None else relations
        # populate_existing refreshes rows already in the identity map, which
        # may be stale after storage-side ON DELETE rules fired.
        return (
            select(self.model)
            .options(*loader_options(self.model, policy))
            .execution_options(populate_existing=True)
        )

    @log_slow_query("entity.find_by_id")
    async def find_by_id(
        self, entity_id: str, relations: RelationPolicy | None = None
    ) -> ModelT | None:
        """Get one entity by id, or None when no row matches."""
        result = await self.db.execute(
            self._select(relations).where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none()

    @log_slow_query("entity.find_all")
    async def find_all(self, relations: RelationPolicy | None = None) -> list[ModelT]:
        result = await self.db.execute(self._select(relations))
        return list(result.scalars().all())

    @log_slow_query("entity.find_by_ids")
    async def find_by_ids(
        self, entity_ids: Sequence[str], relations: RelationPolicy | None = None
    ) -> list[ModelT]:
        """Get multiple entities in a single query.

        Returns entities in no guaranteed order. Missing IDs are silently skipped.
        """
        if not entity_ids:
            return []
        result = await self.db.execute(
            self._select(relations).where(self.model.id.in_(entity_ids))
        )
        return list(result.scalars().all())

    @log_slow_query("entity.save")
    async def save(self, entity: ModelT) -> ModelT:
        """Insert an entity without id, or overwrite the row of one that has it.

        Overwrites copy every attribute set on ``entity``; callers build the
        entity from a complete payload so omitted fields reset to defaults.
        """
        try:
            if entity.id is None:
                self.db.add(entity)
            else:
                entity = await self.db.merge(entity)
            await self.db.flush()
        except IntegrityError as e:
            raise ConstraintViolationError(
                self.entity_name, "save", str(e.orig)
            ) from e
        return entity

    @log_slow_query("entity.delete")
    async def delete(self, entity_id: str) -> DeletionOutcome:
        """Delete by id. ON DELETE rules of referencing rows run in storage."""
        try:
            result = await self.db.execute(
                delete(self.model).where(self.model.id == entity_id)
            )
        except IntegrityError as e:
            raise ConstraintViolationError(
                self.entity_name, "delete", str(e.orig)
            ) from e
        return DeletionOutcome(affected=result.rowcount)
