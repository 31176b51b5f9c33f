from pydantic import BaseModel, Field

class WishlistItemIn(BaseModel):
    packageId: str = Field("", max_length=10)
