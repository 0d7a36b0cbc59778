"""Address repository for database operations."""

from models import Address
from repositories.base import EntityRepository
from repositories.relations import ADDRESS_RELATIONS


class AddressRepository(EntityRepository[Address]):
    """Repository for Address database operations.

    Deleting an address clears the driver and team columns that point at it.
    """

    model = Address
    relations = ADDRESS_RELATIONS
