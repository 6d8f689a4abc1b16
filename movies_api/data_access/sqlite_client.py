# SQLite connection and repository logic
# movies_api/data_access/sqlite_client.py

import logging
import sqlite3
from pathlib import Path
from typing import Any, Optional, Sequence, Type, Union

from pydantic import BaseModel

from movies_api.data_access.query_builder import FilterSpec, build_order_clause, build_where_clause
from movies_api.models.movie import MovieRecord
from movies_api.models.page import Page
from movies_api.models.rating import RatingRecord
from movies_api.utils.helpers import calculate_offset

logger = logging.getLogger(__name__)


class QueryError(Exception):
    """Raised when the backing store fails to execute a query."""
    pass

# --- Connection Helpers ---

def open_connection(path: Union[str, Path], read_only: bool = True) -> sqlite3.Connection:
    """
    Opens a SQLite database file as a store handle.

    Rows come back as `sqlite3.Row`. The handle may be shared between the
    worker threads that serve requests. That sharing is only safe when the
    linked SQLite library is built threadsafe in serialized mode
    (`sqlite3.threadsafety == 3`); the module's own check_same_thread guard
    is turned off here, so it will not catch a library built otherwise.

    Args:
        path: Location of the database file.
        read_only: Open with `mode=ro` so the file is never created or written.

    Raises:
        QueryError: If the file cannot be opened.
    """
    uri = Path(path).resolve().as_uri()
    if read_only:
        uri += "?mode=ro"
    try:
        conn = sqlite3.connect(uri, uri=True, check_same_thread=False)
    except sqlite3.Error as e:
        logger.error(f"Could not open SQLite database {path}: {e}", exc_info=True)
        raise QueryError(f"Could not open database '{path}': {e}") from e
    conn.row_factory = sqlite3.Row
    logger.info(f"Opened SQLite database {path} (read_only={read_only})")
    return conn

# --- Base Repository ---
class BaseRepository:
    """
    Paged, filtered reads against one table.

    Subclasses name the table, its primary key and the model a full row maps to.
    """
    table: str = ""
    primary_key: str = ""
    record_model: Type[BaseModel] = BaseModel

    def __init__(self, connection: sqlite3.Connection):
        self.connection = connection
        logger.debug(f"Initialized repository for table: {self.table}")

    def _fetch(self, sql: str, params: Sequence[Any] = (), one: bool = False) -> Any:
        logger.debug(f"SQL: {sql} | params: {list(params)}")
        try:
            cursor = self.connection.execute(sql, tuple(params))
            return cursor.fetchone() if one else cursor.fetchall()
        except (sqlite3.Error, OverflowError) as e:
            logger.error(f"DB error on {self.table}: {e} | SQL: {sql}", exc_info=True)
            raise QueryError(f"Query on '{self.table}' failed: {e}") from e

    def find_by_id(self, record_id: Any) -> Optional[BaseModel]:
        """Returns the full row whose primary key equals *record_id*, or None."""
        row = self._fetch(
            f"SELECT * FROM {self.table} WHERE {self.primary_key} = ?", (record_id,), one=True
        )
        return self.record_model.model_validate(dict(row)) if row else None

    def _count_total(self, where_clause: str, params: Sequence[Any]) -> int:
        row = self._fetch(
            f"SELECT COUNT(*) AS total FROM {self.table} {where_clause}", params, one=True
        )
        return row["total"]

    def find_all(self, spec: Optional[FilterSpec] = None, page: int = 1, limit: int = 10) -> Page:
        """
        Returns one page of rows matching *spec* plus the unpaged match count.

        Rows are plain dicts holding only the projected columns. The offset is
        (page - 1) * limit without clamping; SQLite treats a negative offset
        as zero. A limit of 0 returns no rows but still the full total.

        Raises:
            QueryError: If either query fails, e.g. an unknown projected column.
        """
        spec = spec or FilterSpec()
        where_clause, params = build_where_clause(spec.where, spec.like)
        order_clause = build_order_clause(spec.order)

        total = self._count_total(where_clause, params)

        columns = ", ".join(spec.select) if spec.select else "*"
        data_query = f"SELECT {columns} FROM {self.table} {where_clause} {order_clause} LIMIT ? OFFSET ?"
        rows = self._fetch(data_query, [*params, limit, calculate_offset(page, limit)])

        return Page(data=[dict(row) for row in rows], total=total, page=page, limit=limit)

# --- Movie Repository ---
class MovieRepository(BaseRepository):
    table = "movies"
    primary_key = "movieId"
    record_model = MovieRecord

# --- Rating Repository ---
class RatingRepository(BaseRepository):
    table = "ratings"
    primary_key = "ratingId"
    record_model = RatingRecord

    def average_for_movie(self, movie_id: int) -> Optional[float]:
        """Return the mean rating for *movie_id* or **None** if it has no ratings."""
        row = self._fetch(
            f"SELECT AVG(rating) AS avg FROM {self.table} WHERE movieId = ?", (movie_id,), one=True
        )
        if row is None or row["avg"] is None:
            return None
        return float(row["avg"])
