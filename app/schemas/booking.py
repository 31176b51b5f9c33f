from datetime import date
from pydantic import BaseModel, Field

MAX_TRAVELERS = 50

class BookingCreate(BaseModel):
    packageId: str = Field("", max_length=10)
    travelDate: date | None = None
    travelers: int = Field(0, le=MAX_TRAVELERS)

class BookingOut(BaseModel):
    message: str = "Booking created successfully"
    bookingId: str
    packageId: str
    travelDate: str
    travelers: int
    totalAmount: float
