# movies_api/models/movie.py

from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field

from movies_api.models.page import PaginationData

# --- Projection allow-lists ---
# Columns the HTTP layer may request for list rows and for the detail view.
MOVIE_LIST_FIELDS = (
    "movieId",
    "imdbId",
    "title",
    "genres",
    "releaseDate",
    "budget",
)

MOVIE_DETAILS_FIELDS = (
    "movieId",
    "imdbId",
    "title",
    "overview",
    "productionCompanies",
    "releaseDate",
    "budget",
    "runtime",
    "language",
    "genres",
    "status",
)

# --- Stored Row ---
class MovieRecord(BaseModel):
    """One row of the `movies` table, column names as stored."""
    model_config = ConfigDict(from_attributes=True)

    movieId: int = Field(..., description="Primary key.")
    imdbId: str = Field(..., description="IMDb reference id.")
    title: str
    overview: Optional[str] = None
    productionCompanies: Optional[str] = Field(None, description="Usually a JSON-encoded list.")
    releaseDate: Optional[str] = Field(None, description="ISO-ish date, YYYY-MM-DD.")
    budget: Optional[int] = None
    revenue: Optional[int] = None
    runtime: Optional[int] = Field(None, description="Minutes.")
    language: Optional[str] = None
    genres: Optional[str] = Field(None, description="JSON list of {name} objects or strings, or plain text.")
    status: Optional[str] = None

# --- Models for API Responses ---
class MovieListItem(BaseModel):
    """A formatted movie row in list responses (e.g., GET /api/movies)."""
    movieId: Optional[int] = None
    imdbId: Optional[str] = None
    title: Optional[str] = None
    genres: Optional[str] = Field(None, description="Comma-joined genre names.")
    releaseDate: Optional[str] = None
    budget: Optional[str] = Field(None, description="Budget as USD currency text.")

class MovieDetails(MovieListItem):
    """Formatted detail view of one movie (e.g., GET /api/movies/{movie_id})."""
    overview: Optional[str] = None
    productionCompanies: Optional[str] = Field(None, description="Comma-joined company names.")
    runtime: Optional[int] = None
    language: Optional[str] = None
    status: Optional[str] = None
    averageRating: Optional[str] = Field(None, description="Mean user rating to two decimals, null when unrated.")

class MoviePage(BaseModel):
    """Response structure for paginated movie lists."""
    data: List[MovieListItem]
    pagination: PaginationData
