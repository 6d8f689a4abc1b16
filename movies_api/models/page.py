# movies_api/models/page.py

from typing import Any, Dict, List
from pydantic import BaseModel, Field

from movies_api.utils.helpers import calculate_total_pages

class Page(BaseModel):
    """
    One window of a filtered, optionally sorted result set.

    `total` counts every row matching the filter, independent of `page` and
    `limit`, which are echoed back exactly as requested.
    """
    data: List[Dict[str, Any]] = Field(default_factory=list)
    total: int
    page: int
    limit: int

    @property
    def total_pages(self) -> int:
        return calculate_total_pages(self.total, self.limit)

# --- Model for Paginated API Responses ---
class PaginationData(BaseModel):
    """Metadata for paginated responses."""
    page: int
    limit: int
    total: int
    totalPages: int

    @classmethod
    def from_page(cls, page: Page) -> "PaginationData":
        return cls(page=page.page, limit=page.limit, total=page.total, totalPages=page.total_pages)
