"""Repository layer for database operations.

Repositories encapsulate all database queries, keeping routes thin and focused
on HTTP handling. This separation provides:
- One persistence gateway per entity with a shared CRUD contract
- Explicit, per-entity relation-loading policies (see repositories.relations)
- Storage constraint failures surfaced as ConstraintViolationError
"""

from repositories.address_repository import AddressRepository
from repositories.base import DeletionOutcome, EntityRepository
from repositories.car_repository import CarRepository
from repositories.class_repository import ClassRepository
from repositories.driver_repository import DriverRepository
from repositories.exceptions import ConstraintViolationError, RepositoryError
from repositories.race_repository import RaceRepository
from repositories.race_result_repository import RaceResultRepository
from repositories.team_repository import TeamRepository
from repositories.utils import log_slow_query

__all__ = [
    "AddressRepository",
    "CarRepository",
    "ClassRepository",
    "ConstraintViolationError",
    "DeletionOutcome",
    "DriverRepository",
    "EntityRepository",
    "RaceRepository",
    "RaceResultRepository",
    "RepositoryError",
    "TeamRepository",
    "log_slow_query",
]
