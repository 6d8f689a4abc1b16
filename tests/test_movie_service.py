"""
Scenario tests for MovieService over the seeded movies and ratings.
"""

import pytest

from movies_api.data_access.sqlite_client import QueryError
from movies_api.services.movie_service import AVG_RATING_FIELD, DEFAULT_PAGE_SIZE, MovieService


class StubRatings:
    """Rating store double that never finds any ratings."""

    def __init__(self):
        self.calls = []

    def average_for_movie(self, movie_id):
        self.calls.append(movie_id)
        return None


def test_list_returns_all_movies(movie_service):
    page = movie_service.list(page=1)
    assert page.total == 3
    assert page.limit == DEFAULT_PAGE_SIZE
    assert [m["movieId"] for m in page.data] == [1, 2, 3]


def test_list_projection(movie_service):
    page = movie_service.list(page=1, limit=2, select=["movieId", "title"])
    assert page.total == 3
    assert page.total_pages == 2
    assert page.data == [
        {"movieId": 1, "title": "First Light"},
        {"movieId": 2, "title": "Second Wind"},
    ]


def test_get_by_year_uses_release_date_prefix(movie_service):
    page = movie_service.get_by_year(2023, page=1, sort="asc")
    assert page.total == 2
    assert [m["movieId"] for m in page.data] == [1, 2]


def test_get_by_year_descending(movie_service):
    page = movie_service.get_by_year(2023, page=1, sort="desc")
    assert [m["releaseDate"] for m in page.data] == ["2023-02-01", "2023-01-01"]


def test_get_by_year_defaults_to_ascending(movie_service):
    page = movie_service.get_by_year(2023)
    assert [m["releaseDate"] for m in page.data] == ["2023-01-01", "2023-02-01"]


def test_get_by_year_without_matches(movie_service):
    page = movie_service.get_by_year(1999, page=1)
    assert page.total == 0
    assert page.data == []


def test_get_by_genre(movie_service):
    page = movie_service.get_by_genre("Drama", page=1)
    assert page.total == 1
    assert page.data[0]["movieId"] == 3


def test_get_by_genre_matches_inside_json(movie_service):
    page = movie_service.get_by_genre("Comedy", page=1, select=["movieId"])
    assert page.data == [{"movieId": 1}, {"movieId": 2}]


def test_get_by_empty_genre_matches_everything(movie_service):
    page = movie_service.get_by_genre("", page=1)
    assert page.total == 3


def test_get_details_by_id_includes_average(movie_service):
    movie = movie_service.get_details(1)
    assert movie["title"] == "First Light"
    assert movie[AVG_RATING_FIELD] == pytest.approx(4.5)


def test_get_details_by_exact_title(movie_service):
    movie = movie_service.get_details("Second Wind")
    assert movie["movieId"] == 2
    assert movie[AVG_RATING_FIELD] == pytest.approx(4.0)


def test_get_details_title_is_not_a_pattern(movie_service):
    assert movie_service.get_details("Second") is None
    assert movie_service.get_details("%Wind%") is None


def test_get_details_missing_returns_none(movie_service):
    assert movie_service.get_details(999) is None


def test_get_details_projection_without_id(movie_service):
    movie = movie_service.get_details(3, select=["title"])
    assert movie == {"title": "Third Act", AVG_RATING_FIELD: pytest.approx(2.0)}


def test_get_details_keeps_missing_average_as_none(movie_repository):
    ratings = StubRatings()
    service = MovieService(movie_repository=movie_repository, rating_repository=ratings)
    movie = service.get_details(2)
    assert AVG_RATING_FIELD in movie
    assert movie[AVG_RATING_FIELD] is None
    assert ratings.calls == [2]


def test_query_errors_propagate(movie_service):
    with pytest.raises(QueryError):
        movie_service.list(page=1, select=["notAColumn"])


def test_get_details_without_key_returns_none(movie_service):
    assert movie_service.get_details(None) is None


def test_get_by_year_none_sort_defaults_to_ascending(movie_service):
    page = movie_service.get_by_year(2023, page=1, sort=None)
    assert [m["releaseDate"] for m in page.data] == ["2023-01-01", "2023-02-01"]


def test_get_details_out_of_range_id_raises_query_error(movie_service):
    with pytest.raises(QueryError):
        movie_service.get_details(2**63)
