"""Race class repository for database operations."""

from models import RaceClass
from repositories.base import EntityRepository
from repositories.relations import CLASS_RELATIONS


class ClassRepository(EntityRepository[RaceClass]):
    """Repository for RaceClass database operations."""

    model = RaceClass
    relations = CLASS_RELATIONS
