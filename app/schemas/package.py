from pydantic import BaseModel, Field
from typing import Optional

class PackageCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    price: float = Field(ge=0, lt=100_000_000)  # Numeric(10, 2)
    destinationId: Optional[str] = Field(None, max_length=10)
    location: str = Field("", max_length=200)
    description: str = ""
    duration: int = Field(1, ge=1, le=365)
    imageUrl: Optional[str] = Field(None, max_length=512)
