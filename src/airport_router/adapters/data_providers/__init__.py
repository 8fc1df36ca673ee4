"""
Data provider adapters for airport and route data sources.
"""

from src.airport_router.adapters.data_providers.openflights_provider import (
    OpenFlightsDataProvider,
)

__all__ = [
    "OpenFlightsDataProvider",
]
