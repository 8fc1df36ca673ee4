"""
Configuration module for the Airport Router.

This module handles loading environment variables and provides
centralized configuration for data locations and search defaults.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()


class Config:
    """
    Application configuration class.

    Attributes:
        AIRPORTS_DATA_PATH: OpenFlights airports.dat file.
        ROUTES_DATA_PATH: OpenFlights routes.dat file.
        MAX_HOPS: Default hop budget for route queries.
        PROXIMITY_RADIUS_KM: Radius for synthesized ground connections.
        LOG_LEVEL: Root logging level for the HTTP entry point.

    Raises:
        ValueError: If a numeric setting is malformed or out of range.
    """

    AIRPORTS_DATA_PATH: str = os.getenv("AIRPORTS_DATA_PATH", "data/airports.dat")
    ROUTES_DATA_PATH: str = os.getenv("ROUTES_DATA_PATH", "data/routes.dat")
    MAX_HOPS: int = int(os.getenv("MAX_HOPS", "5"))
    PROXIMITY_RADIUS_KM: float = float(os.getenv("PROXIMITY_RADIUS_KM", "100"))
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    if MAX_HOPS < 1:
        raise ValueError(f"MAX_HOPS must be >= 1, got {MAX_HOPS}")

    if PROXIMITY_RADIUS_KM < 0:
        raise ValueError(
            f"PROXIMITY_RADIUS_KM must be >= 0, got {PROXIMITY_RADIUS_KM}"
        )
