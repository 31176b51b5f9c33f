from pydantic import BaseModel, Field
from typing import Optional

class ReviewCreate(BaseModel):
    packageId: str = Field("", max_length=10)
    rating: Optional[int] = Field(None, ge=1, le=5)
    reviewText: str = ""
