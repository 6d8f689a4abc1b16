# tests/conftest.py

import sqlite3

import pytest

from movies_api.data_access.sqlite_client import MovieRepository, RatingRepository, open_connection
from movies_api.services.movie_service import MovieService

MOVIES_SCHEMA = """
CREATE TABLE movies (
    movieId             INTEGER PRIMARY KEY,
    imdbId              TEXT NOT NULL,
    title               TEXT NOT NULL,
    overview            TEXT,
    productionCompanies TEXT,
    releaseDate         TEXT,
    budget              INTEGER,
    revenue             INTEGER,
    runtime             INTEGER,
    language            TEXT,
    genres              TEXT,
    status              TEXT
)
"""

RATINGS_SCHEMA = """
CREATE TABLE ratings (
    ratingId  INTEGER PRIMARY KEY,
    userId    INTEGER,
    movieId   INTEGER,
    rating    INTEGER,
    timestamp INTEGER
)
"""

MOVIES = [
    (1, "tt0000001", "First Light", "A dawn story.", '[{"name": "Studio A"}]',
     "2023-01-01", 1000000, 5000000, 101, "en", '[{"name": "Action"}, {"name": "Comedy"}]', "Released"),
    (2, "tt0000002", "Second Wind", None, None,
     "2023-02-01", None, None, 95, "fr", '["Comedy"]', "Released"),
    (3, "tt0000003", "Third Act", "A quiet drama.", '[{"name": "Studio B"}, {"name": "Studio C"}]',
     "2022-12-01", 2500, 0, 120, "en", "Drama", "Released"),
]

RATINGS = [
    (1, 10, 1, 5, 1672531200),
    (2, 11, 1, 4, 1672531300),
    (3, 10, 2, 3, 1675209600),
    (4, 12, 2, 5, 1675209700),
    (5, 11, 3, 2, 1669852800),
]


def _seed(path, schema, insert_sql, rows):
    conn = sqlite3.connect(path)
    with conn:
        conn.execute(schema)
        conn.executemany(insert_sql, rows)
    conn.close()


@pytest.fixture
def db_paths(tmp_path):
    movies_path = tmp_path / "movies.db"
    ratings_path = tmp_path / "ratings.db"
    _seed(movies_path, MOVIES_SCHEMA, "INSERT INTO movies VALUES (?,?,?,?,?,?,?,?,?,?,?,?)", MOVIES)
    _seed(ratings_path, RATINGS_SCHEMA, "INSERT INTO ratings VALUES (?,?,?,?,?)", RATINGS)
    return movies_path, ratings_path


@pytest.fixture
def movies_conn(db_paths):
    conn = open_connection(db_paths[0])
    yield conn
    conn.close()


@pytest.fixture
def ratings_conn(db_paths):
    conn = open_connection(db_paths[1])
    yield conn
    conn.close()


@pytest.fixture
def movie_repository(movies_conn):
    return MovieRepository(movies_conn)


@pytest.fixture
def rating_repository(ratings_conn):
    return RatingRepository(ratings_conn)


@pytest.fixture
def movie_service(movie_repository, rating_repository):
    return MovieService(movie_repository=movie_repository, rating_repository=rating_repository)
