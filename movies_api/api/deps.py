# FastAPI dependencies (store handles and services)
# movies_api/api/deps.py

import logging
import sqlite3
from typing import Optional

from fastapi import Depends, HTTPException, status

from movies_api.core.config import settings
from movies_api.data_access.sqlite_client import MovieRepository, QueryError, RatingRepository, open_connection
from movies_api.services.movie_service import MovieService

logger = logging.getLogger(__name__)

# --- Global Store Handles (opened once in the app lifespan) ---
movies_conn: Optional[sqlite3.Connection] = None
ratings_conn: Optional[sqlite3.Connection] = None

def initialize_connections():
    """
    Opens the read-only movies and ratings databases.
    Call this during FastAPI startup using lifespan events.
    """
    global movies_conn, ratings_conn
    logger.info("Initializing database connections...")

    try:
        movies_conn = open_connection(settings.MOVIES_DB_PATH)
    except QueryError as e:
        logger.error(f"Movies database unavailable: {e}")
        movies_conn = None

    try:
        ratings_conn = open_connection(settings.RATINGS_DB_PATH)
    except QueryError as e:
        logger.error(f"Ratings database unavailable: {e}")
        ratings_conn = None

def close_connections():
    """
    Closes both database connections.
    Call this during FastAPI shutdown using lifespan events.
    """
    global movies_conn, ratings_conn
    logger.info("Closing database connections...")
    if movies_conn:
        movies_conn.close()
        logger.info("Movies database closed.")
    if ratings_conn:
        ratings_conn.close()
        logger.info("Ratings database closed.")
    movies_conn = None
    ratings_conn = None


# --- Store Dependencies ---

def get_movie_repository() -> MovieRepository:
    """
    FastAPI dependency that provides the movies store.

    Raises:
        HTTPException 503: If the movies database is not available.
    """
    if movies_conn is None:
        logger.critical("Movies database connection is not available. Check initialization.")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Movies database not available.",
        )
    return MovieRepository(movies_conn)

def get_rating_repository() -> RatingRepository:
    """
    FastAPI dependency that provides the ratings store.

    Raises:
        HTTPException 503: If the ratings database is not available.
    """
    if ratings_conn is None:
        logger.critical("Ratings database connection is not available. Check initialization.")
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Ratings database not available.",
        )
    return RatingRepository(ratings_conn)


# --- Service Dependencies ---

def get_movie_service(
    movie_repository: MovieRepository = Depends(get_movie_repository),
    rating_repository: RatingRepository = Depends(get_rating_repository),
) -> MovieService:
    return MovieService(movie_repository=movie_repository, rating_repository=rating_repository)
