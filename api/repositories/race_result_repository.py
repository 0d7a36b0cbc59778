"""Race result repository for database operations."""

from sqlalchemy import and_

from models import RaceResult
from repositories.base import EntityRepository
from repositories.relations import RACE_RESULT_RELATIONS, RelationPolicy
from repositories.utils import log_slow_query


class RaceResultRepository(EntityRepository[RaceResult]):
    """Repository for RaceResult database operations.

    Saving a second result for the same (car, race, driver) raises
    ConstraintViolationError.
    """

    model = RaceResult
    relations = RACE_RESULT_RELATIONS

    @log_slow_query("race_result.find_by_query")
    async def find_by_query(
        self,
        *,
        race: str | None = None,
        car: str | None = None,
        driver: str | None = None,
        relations: RelationPolicy | None = None,
    ) -> list[RaceResult]:
        """Find results by exact race, car and/or driver id (ANDed).

        With no filters every result is returned.
        """
        conditions = []
        if race is not None:
            conditions.append(RaceResult.race_id == race)
        if car is not None:
            conditions.append(RaceResult.car_id == car)
        if driver is not None:
            conditions.append(RaceResult.driver_id == driver)

        stmt = self._select(relations)
        if conditions:
            stmt = stmt.where(and_(*conditions))
        result = await self.db.execute(stmt)
        return list(result.scalars().all())
