"""API route modules."""

from .addresses_routes import router as addresses_router
from .cars_routes import router as cars_router
from .classes_routes import router as classes_router
from .drivers_routes import router as drivers_router
from .health_routes import router as health_router
from .race_results_routes import router as race_results_router
from .races_routes import router as races_router
from .teams_routes import router as teams_router

__all__ = [
    "addresses_router",
    "cars_router",
    "classes_router",
    "drivers_router",
    "health_router",
    "race_results_router",
    "races_router",
    "teams_router",
]
