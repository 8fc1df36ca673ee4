import logging
import sys
import time
from typing import List, Optional

from dotenv import load_dotenv
from fastapi import Depends, FastAPI, HTTPException, Query, Request
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict

# Load environment variables from .env file
load_dotenv()

from src.airport_router.application import FindRoutes
from src.airport_router.config import Config
from src.airport_router.exceptions import AirportNotFoundError, RouteNotFoundError
from src.airport_router.ports.graph_repository import GraphNotInitializedError

logger = logging.getLogger(__name__)

AIRPORT_NOT_FOUND = "No such airport, please provide a valid IATA/ICAO code"
ROUTE_AIRPORT_NOT_FOUND = "No such airport, please provide a valid IATA/ICAO codes"
ROUTE_NOT_FOUND = "Could not find a route"


def setup_logging(level: str = Config.LOG_LEVEL) -> None:
    """
    Configure the root logger to write timestamped records to stdout.

    No-op for handlers if the root logger is already configured
    (e.g. by uvicorn or pytest); the level is always applied.
    """
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )
    logging.getLogger().setLevel(level)


setup_logging()

# Data is read lazily: the graph is built on the first request that needs it
router = FindRoutes()

app = FastAPI(title="Airport Routing API")


def get_router() -> FindRoutes:
    return router


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "%s %s %d %.1fms",
        request.method,
        request.url.path,
        response.status_code,
        (time.perf_counter() - start) * 1000,
    )
    return response


# --- Pydantic Schemas (The JSON Contract) ---


class LocationSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)  # Allows reading from dataclasses

    latitude: float
    longitude: float


class AirportSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    iata: Optional[str] = None
    icao: Optional[str] = None
    location: LocationSchema


class RouteSummarySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    source: str
    destination: str
    distance: float
    hops: List[str]


# --- API Endpoints ---
# Plain def: the search is synchronous and runs in FastAPI's threadpool.


@app.get("/health", response_class=PlainTextResponse)
def health():
    return "OK"


@app.get("/airports/{code}", response_model=AirportSchema)
def get_airport(code: str, routes: FindRoutes = Depends(get_router)):
    try:
        airport = routes.get_airport(code)
    except GraphNotInitializedError as e:
        raise HTTPException(status_code=503, detail=str(e))

    if airport is None:
        raise HTTPException(status_code=404, detail=AIRPORT_NOT_FOUND)

    return airport


@app.get("/routes/{source}/{destination}", response_model=RouteSummarySchema)
def find_route(
    source: str,
    destination: str,
    max_hops: int = Query(Config.MAX_HOPS, ge=1),
    routes: FindRoutes = Depends(get_router),
):
    try:
        return routes.find_route(source, destination, max_hops=max_hops)
    except AirportNotFoundError:
        raise HTTPException(status_code=404, detail=ROUTE_AIRPORT_NOT_FOUND)
    except RouteNotFoundError:
        raise HTTPException(status_code=404, detail=ROUTE_NOT_FOUND)
    except GraphNotInitializedError as e:
        raise HTTPException(status_code=503, detail=str(e))
