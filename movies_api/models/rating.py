# movies_api/models/rating.py

from pydantic import BaseModel, ConfigDict, Field

class RatingRecord(BaseModel):
    """One row of the `ratings` table."""
    model_config = ConfigDict(from_attributes=True)

    ratingId: int = Field(..., description="Primary key.")
    userId: int
    movieId: int = Field(..., description="Movie the rating belongs to. Not enforced as a foreign key.")
    rating: int = Field(..., description="Expected 1-5, not validated.")
    timestamp: int = Field(..., description="Unix seconds.")
