"""Team repository for database operations."""

from models import Team
from repositories.base import EntityRepository
from repositories.relations import TEAM_RELATIONS


class TeamRepository(EntityRepository[Team]):
    """Repository for Team database operations.

    Team owns the team_drivers association: saving a team with ``drivers``
    set rewrites its association rows, deleting it removes them.
    """

    model = Team
    relations = TEAM_RELATIONS
