# movies_api/api/endpoints/movies.py

import logging
from typing import Any, Dict, List, Literal, Optional, Sequence

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from movies_api.api.deps import get_movie_service
from movies_api.core.config import settings
from movies_api.data_access.sqlite_client import QueryError
from movies_api.models.movie import MOVIE_DETAILS_FIELDS, MOVIE_LIST_FIELDS, MovieDetails, MovieListItem, MoviePage
from movies_api.models.page import Page, PaginationData
from movies_api.services.movie_service import AVG_RATING_FIELD, DEFAULT_PAGE, DEFAULT_SORT, MovieService
from movies_api.utils.helpers import format_dollars, format_text

logger = logging.getLogger(__name__)
router = APIRouter()

# --- Request Helpers ---

def _parse_fields(fields: Optional[str], allowed: Sequence[str]) -> List[str]:
    """Splits a comma-separated projection and checks it against *allowed*."""
    if not fields:
        return list(allowed)
    requested = [f.strip() for f in fields.split(",") if f.strip()]
    unknown = [f for f in requested if f not in allowed]
    if unknown:
        raise HTTPException(
            status_code=422,
            detail=f"Unknown fields: {', '.join(unknown)}. Allowed: {', '.join(allowed)}",
        )
    return list(dict.fromkeys(requested))

def list_fields(
    fields: Optional[str] = Query(None, description="Comma-separated columns to return."),
) -> List[str]:
    return _parse_fields(fields, MOVIE_LIST_FIELDS)

def detail_fields(
    fields: Optional[str] = Query(None, description="Comma-separated columns to return."),
) -> List[str]:
    return _parse_fields(fields, MOVIE_DETAILS_FIELDS)

def page_size(
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE, description="Number of items per page."),
) -> int:
    return limit

# --- Response Shaping ---

def _format_movie(row: Dict[str, Any]) -> Dict[str, Any]:
    """Applies display formatting to the columns present in *row*."""
    formatted: Dict[str, Any] = {}
    for key, value in row.items():
        if key in ("genres", "productionCompanies"):
            formatted[key] = format_text(value)
        elif key == "budget":
            formatted[key] = format_dollars(value)
        elif key == AVG_RATING_FIELD:
            formatted["averageRating"] = f"{value:.2f}" if value is not None else None
        else:
            formatted[key] = value
    return formatted

def _to_movie_page(result: Page) -> MoviePage:
    return MoviePage(
        data=[MovieListItem(**_format_movie(row)) for row in result.data],
        pagination=PaginationData.from_page(result),
    )

def _query_failed(action: str, e: QueryError) -> HTTPException:
    logger.error(f"Error {action}: {e}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"An error occurred while {action}.",
    )

# --- Endpoints ---

@router.get(
    "", # GET /api/movies
    response_model=MoviePage,
    response_model_exclude_unset=True,
    summary="List Movies",
    description="Retrieve a paginated list of all movies.",
)
def list_movies(
    page: int = Query(DEFAULT_PAGE, ge=1, description="Page number."),
    limit: int = Depends(page_size),
    select: List[str] = Depends(list_fields),
    movie_service: MovieService = Depends(get_movie_service),
):
    try:
        return _to_movie_page(movie_service.list(page=page, limit=limit, select=select))
    except QueryError as e:
        raise _query_failed("retrieving movies", e)

@router.get(
    "/year/{year}", # GET /api/movies/year/{year}
    response_model=MoviePage,
    response_model_exclude_unset=True,
    summary="List Movies by Year",
    description="Retrieve movies released in a given year, sorted by release date.",
)
def list_movies_by_year(
    year: int = Path(..., description="Release year, e.g. 1994."),
    page: int = Query(DEFAULT_PAGE, ge=1, description="Page number."),
    sort: Literal["asc", "desc"] = Query(DEFAULT_SORT, description="Release date sort direction."),
    limit: int = Depends(page_size),
    select: List[str] = Depends(list_fields),
    movie_service: MovieService = Depends(get_movie_service),
):
    try:
        result = movie_service.get_by_year(year, page=page, sort=sort, limit=limit, select=select)
        return _to_movie_page(result)
    except QueryError as e:
        raise _query_failed(f"retrieving movies for year {year}", e)

@router.get(
    "/genre/{genre}", # GET /api/movies/genre/{genre}
    response_model=MoviePage,
    response_model_exclude_unset=True,
    summary="List Movies by Genre",
    description="Retrieve movies whose genres contain the given text.",
)
def list_movies_by_genre(
    genre: str = Path(..., description="Genre name or fragment, e.g. Drama."),
    page: int = Query(DEFAULT_PAGE, ge=1, description="Page number."),
    limit: int = Depends(page_size),
    select: List[str] = Depends(list_fields),
    movie_service: MovieService = Depends(get_movie_service),
):
    try:
        return _to_movie_page(movie_service.get_by_genre(genre, page=page, limit=limit, select=select))
    except QueryError as e:
        raise _query_failed(f"retrieving movies for genre '{genre}'", e)

def _movie_details(movie_service: MovieService, key: Any, select: List[str]) -> MovieDetails:
    try:
        movie = movie_service.get_details(key, select=select)
    except QueryError as e:
        raise _query_failed("retrieving the movie details", e)
    if movie is None:
        logger.warning(f"Movie not found attempt: {key!r}")
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Movie '{key}' not found.",
        )
    return MovieDetails(**_format_movie(movie))

@router.get(
    "/title/{title}", # GET /api/movies/title/{title}
    response_model=MovieDetails,
    response_model_exclude_unset=True,
    summary="Get Movie Details by Title",
    description="Retrieve a movie and its average rating by exact title.",
    responses={404: {"description": "Movie not found"}},
)
def get_movie_by_title(
    title: str,
    select: List[str] = Depends(detail_fields),
    movie_service: MovieService = Depends(get_movie_service),
):
    return _movie_details(movie_service, title, select)

@router.get(
    "/{movie_id}", # GET /api/movies/{movie_id}
    response_model=MovieDetails,
    response_model_exclude_unset=True,
    summary="Get Movie Details",
    description="Retrieve a movie and its average rating by id.",
    responses={404: {"description": "Movie not found"}},
)
def get_movie(
    movie_id: int,
    select: List[str] = Depends(detail_fields),
    movie_service: MovieService = Depends(get_movie_service),
):
    return _movie_details(movie_service, movie_id, select)
