"""Car repository for database operations."""

from sqlalchemy import and_

from models import Car
from repositories.base import EntityRepository
from repositories.relations import CAR_RELATIONS, RelationPolicy
from repositories.utils import log_slow_query


class CarRepository(EntityRepository[Car]):
    """Repository for Car database operations."""

    model = Car
    relations = CAR_RELATIONS

    @log_slow_query("car.find_all_by_query")
    async def find_all_by_query(
        self,
        *,
        make: str | None = None,
        model: str | None = None,
        relations: RelationPolicy | None = None,
    ) -> list[Car]:
        """Find cars whose make and/or model contain the given text.

        Matching is a case-sensitive substring test; LIKE wildcards in the
        input are escaped. Empty or missing filters match every car.
        """
        conditions = []
        if make:
            conditions.append(Car.make.contains(make, autoescape=True))
        if model:
            conditions.append(Car.model.contains(model, autoescape=True))

        stmt = self._select(relations)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
