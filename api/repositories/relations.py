"""Relation-loading policies for each entity.

A policy is a tuple of dotted relationship paths that must be eagerly loaded
on read. Repositories default to the policy declared for their entity and
accept an explicit override per call (``()`` loads the bare row).
"""

from collections.abc import Iterable

from sqlalchemy.orm import RelationshipProperty, selectinload
from sqlalchemy.orm.interfaces import LoaderOption

RelationPolicy = tuple[str, ...]

ADDRESS_RELATIONS: RelationPolicy = ()

CLASS_RELATIONS: RelationPolicy = ()

CAR_RELATIONS: RelationPolicy = (
    "class_",
    "team",
    "team.business_address",
)

DRIVER_RELATIONS: RelationPolicy = (
    "home_address",
    "management_address",
    "teams",
    "teams.business_address",
)

TEAM_RELATIONS: RelationPolicy = (
    "business_address",
    "cars",
    "cars.class_",
    "drivers",
    "drivers.home_address",
    "drivers.management_address",
)

# Results are fetched through RaceResultRepository.find_by_query instead.
RACE_RELATIONS: RelationPolicy = ()

RACE_RESULT_RELATIONS: RelationPolicy = (
    "race",
    "car",
    "car.class_",
    "driver",
    "driver.home_address",
    "driver.management_address",
    "class_",
)


def loader_options(model: type, relations: Iterable[str]) -> list[LoaderOption]:
    """Build selectinload chains for the given dotted relation paths.

    Raises AttributeError for a path segment that is not a relationship
    of the model it is resolved against.
    """
    options: list[LoaderOption] = []
    for path in relations:
        current = model
        loader: LoaderOption | None = None
        for name in path.split("."):
            attr = getattr(current, name)
            prop = attr.property
            if not isinstance(prop, RelationshipProperty):
                raise AttributeError(
                    f"{current.__name__}.{name} is not a relationship"
                )
            loader = selectinload(attr) if loader is None else loader.selectinload(attr)
            current = prop.mapper.class_
        if loader is not None:
            options.append(loader)
    return options
