# movies_api/services/movie_service.py

import logging
from typing import Any, Dict, Optional, Sequence, Union

from movies_api.data_access.query_builder import FilterSpec
from movies_api.data_access.sqlite_client import MovieRepository, RatingRepository
from movies_api.models.page import Page

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 50
DEFAULT_SORT = "asc"

# Field the average rating is attached under in detail results.
AVG_RATING_FIELD = "avgRating"

class MovieService:
    def __init__(self, movie_repository: MovieRepository, rating_repository: RatingRepository):
        """
        Initializes the Movie Service.

        Args:
            movie_repository: Store for the `movies` table.
            rating_repository: Store for the `ratings` table, used for average ratings.
        """
        self.movie_repository = movie_repository
        self.rating_repository = rating_repository

    def list(
        self,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
        select: Optional[Sequence[str]] = None,
    ) -> Page:
        """
        Retrieves one page of all movies, unfiltered and in storage order.

        Raises:
            QueryError: If a database error occurs.
        """
        result = self.movie_repository.find_all(FilterSpec(select=select or ()), page=page, limit=limit)
        logger.info(f"Listed {len(result.data)} movies (page {page}, total {result.total})")
        return result

    def get_details(
        self,
        id_or_title: Union[int, str],
        select: Optional[Sequence[str]] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Retrieves a single movie with its average rating.

        An int key matches `movieId`; a str key must equal the title exactly.
        The result carries the projected columns plus `avgRating`, which is
        None when the movie has no ratings.

        Args:
            id_or_title: Movie id or exact title.
            select: Columns to return; all columns when empty.

        Returns:
            The movie as a dict, or None if nothing matches.

        Raises:
            QueryError: If a database error occurs.
        """
        # A None key would be elided from the WHERE clause and match any row.
        if id_or_title is None:
            return None
        if isinstance(id_or_title, int) and not isinstance(id_or_title, bool):
            where = {"movieId": id_or_title}
        else:
            where = {"title": id_or_title}

        # The id is needed for the rating lookup even if the caller did not ask for it.
        columns = list(select or ())
        drop_id = bool(columns) and "movieId" not in columns
        if drop_id:
            columns.append("movieId")

        result = self.movie_repository.find_all(FilterSpec(where=where, select=columns), page=1, limit=1)
        if not result.data:
            logger.info(f"No movie found for key {id_or_title!r}")
            return None

        movie = dict(result.data[0])
        movie[AVG_RATING_FIELD] = self.rating_repository.average_for_movie(movie["movieId"])
        if drop_id:
            del movie["movieId"]
        logger.debug(f"Found movie for key {id_or_title!r}")
        return movie

    def get_by_year(
        self,
        year: int,
        page: int = DEFAULT_PAGE,
        sort: Optional[str] = DEFAULT_SORT,
        limit: int = DEFAULT_PAGE_SIZE,
        select: Optional[Sequence[str]] = None,
    ) -> Page:
        """
        Retrieves movies released in *year*, ordered by release date.

        Matches release dates starting with "<year>-".

        Raises:
            QueryError: If a database error occurs.
        """
        spec = FilterSpec(
            like={"releaseDate": f"{year}-%"},
            order={"releaseDate": sort or DEFAULT_SORT},
            select=select or (),
        )
        result = self.movie_repository.find_all(spec, page=page, limit=limit)
        logger.info(f"Fetched {len(result.data)} movies for year {year} (page {page}, total {result.total})")
        return result

    def get_by_genre(
        self,
        genre: str,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_PAGE_SIZE,
        select: Optional[Sequence[str]] = None,
    ) -> Page:
        """
        Retrieves movies whose genres text contains *genre*.

        An empty genre becomes the pattern "%%" and matches every movie with
        a genres value.

        Raises:
            QueryError: If a database error occurs.
        """
        spec = FilterSpec(like={"genres": f"%{genre}%"}, select=select or ())
        result = self.movie_repository.find_all(spec, page=page, limit=limit)
        logger.info(f"Fetched {len(result.data)} movies for genre '{genre}' (page {page}, total {result.total})")
        return result
