from pydantic import BaseModel, Field
from typing import List, Optional

MAX_PASSENGERS = 9

class FlightPassengerIn(BaseModel):
    # lengths follow the flight_passengers columns
    title: Optional[str] = Field("", max_length=10)
    firstName: str = Field(max_length=100)
    lastName: str = Field(max_length=100)
    dateOfBirth: Optional[str] = Field("", max_length=20)
    passportNumber: Optional[str] = Field("", max_length=40)

class FlightBookingCreate(BaseModel):
    outboundFlightId: str = Field("", max_length=10)
    returnFlightId: Optional[str] = Field(None, max_length=10)
    passengers: int = Field(0, le=MAX_PASSENGERS)
    passengerDetails: List[FlightPassengerIn] = []

class FlightBookingOut(BaseModel):
    message: str = "Flight booking created successfully"
    bookingId: str
    totalAmount: float

class FlightPassengerOut(BaseModel):
    passengerId: str
    title: str
    firstName: str
    lastName: str
    dateOfBirth: str
    passportNumber: str

class FlightBookingDetail(BaseModel):
    bookingId: str
    outboundFlightId: str
    returnFlightId: Optional[str] = None
    bookingDate: str
    numberOfPassengers: int
    totalAmount: float
    paymentStatus: str
    passengers: List[FlightPassengerOut]
