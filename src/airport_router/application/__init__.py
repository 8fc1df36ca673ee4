"""
Application layer for the Airport Router.

This layer provides the public API for the routing engine.
It acts as a facade, handling dependency initialization and providing
a simple interface for consumers.
"""

from src.airport_router.application.find_routes import FindRoutes

__all__ = ["FindRoutes"]
