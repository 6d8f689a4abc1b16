# /health endpoint
# movies_api/api/endpoints/health.py

import logging
from typing import Dict

from fastapi import APIRouter, status
from pydantic import BaseModel

from movies_api.api import deps

logger = logging.getLogger(__name__)
router = APIRouter()

class HealthResponse(BaseModel):
    status: str = "ok"
    databases: Dict[str, bool]

@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    tags=["Health"],
    summary="Perform a Health Check",
    response_description="Returns the health status of the API.",
)
def health_check():
    """
    Simple health check endpoint to confirm the API is running.

    Reports "degraded" when either database handle failed to open.
    """
    databases = {
        "movies": deps.movies_conn is not None,
        "ratings": deps.ratings_conn is not None,
    }
    return HealthResponse(status="ok" if all(databases.values()) else "degraded", databases=databases)
