"""Race repository for database operations."""

from models import Race
from repositories.base import EntityRepository
from repositories.relations import RACE_RELATIONS


class RaceRepository(EntityRepository[Race]):
    model = Race
    relations = RACE_RELATIONS
