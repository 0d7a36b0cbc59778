"""Driver repository for database operations."""

from models import Driver
from repositories.base import EntityRepository
from repositories.relations import DRIVER_RELATIONS


class DriverRepository(EntityRepository[Driver]):
    """Repository for Driver database operations.

    Reads load both addresses and the driver's teams with their
    business address.
    """

    model = Driver
    relations = DRIVER_RELATIONS
