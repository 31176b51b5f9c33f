from datetime import date, datetime, time, timedelta
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, aliased
from app.db.session import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.models.airline import Airline
from app.models.airport import Airport
from app.models.flight import Flight
from app.schemas.flight import FlightBookingCreate, FlightBookingOut, FlightBookingDetail, FlightPassengerOut
from app.services.flight_booking_service import create_flight_booking, get_flight_booking, list_flight_bookings

router = APIRouter(tags=["flights"])


def _parse_day(value: str, name: str) -> date:
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        raise HTTPException(status_code=400, detail=f"{name} must be YYYY-MM-DD")


def _flight_candidates(db: Session, from_code: str, to_code: str, day: date, passengers: int) -> list[dict]:
    dep, arr = aliased(Airport), aliased(Airport)
    start = datetime.combine(day, time.min)
    rows = (
        db.query(Flight, Airline, dep, arr)
        .join(Airline, Flight.airline_id == Airline.id)
        .join(dep, Flight.departure_airport == dep.code)
        .join(arr, Flight.arrival_airport == arr.code)
        .filter(
            Flight.departure_airport == from_code,
            Flight.arrival_airport == to_code,
            Flight.departure_time >= start,
            Flight.departure_time < start + timedelta(days=1),
            Flight.available_seats >= passengers,
        )
        .order_by(Flight.base_price.asc(), Flight.departure_time.asc())
        .all()
    )
    return [
        {
            "flightId": f.id,
            "flightNumber": f.flight_number,
            "departureTime": f.departure_time.isoformat(),
            "arrivalTime": f.arrival_time.isoformat(),
            "basePrice": float(f.base_price),
            "availableSeats": f.available_seats,
            "airlineName": al.name,
            "logoUrl": al.logo_url,
            "departureCode": d.code,
            "departureCity": d.city,
            "arrivalCode": a.code,
            "arrivalCity": a.city,
        }
        for f, al, d, a in rows
    ]


@router.get("/flights/search")
def search_flights(
    departureAirport: str = "",
    arrivalAirport: str = "",
    departureDate: str = "",
    returnDate: Optional[str] = None,
    passengers: int = 1,
    db: Session = Depends(get_db),
):
    """Outbound (and, with returnDate, reverse-direction) flights with enough seats, cheapest first."""
    if not departureAirport or not arrivalAirport or not departureDate:
        raise HTTPException(status_code=400, detail="Departure airport, arrival airport, and departure date are required")
    if passengers < 1:
        raise HTTPException(status_code=400, detail="passengers must be >= 1")
    from_code, to_code = departureAirport.strip().upper(), arrivalAirport.strip().upper()

    outbound = _flight_candidates(db, from_code, to_code, _parse_day(departureDate, "departureDate"), passengers)
    inbound = []
    if returnDate:
        inbound = _flight_candidates(db, to_code, from_code, _parse_day(returnDate, "returnDate"), passengers)
    return {"outboundFlights": outbound, "returnFlights": inbound}


@router.post("/flights/booking", response_model=FlightBookingOut, status_code=201)
def book_flights(body: FlightBookingCreate, db: Session = Depends(get_db),
                 me: User = Depends(get_current_user)):
    booking = create_flight_booking(
        db,
        me.id,
        body.outboundFlightId,
        body.returnFlightId or None,
        body.passengers,
        [p.model_dump() for p in body.passengerDetails],
    )
    return FlightBookingOut(bookingId=booking.id, totalAmount=float(booking.total_amount))


@router.get("/flights/bookings/{booking_id}", response_model=FlightBookingDetail)
def read_flight_booking(booking_id: str, db: Session = Depends(get_db),
                        me: User = Depends(get_current_user)):
    b, passengers = get_flight_booking(db, me.id, booking_id)
    return FlightBookingDetail(
        bookingId=b.id,
        outboundFlightId=b.outbound_flight_id,
        returnFlightId=b.return_flight_id,
        bookingDate=b.booking_date.isoformat(),
        numberOfPassengers=b.number_of_passengers,
        totalAmount=float(b.total_amount),
        paymentStatus=b.payment_status,
        passengers=[
            FlightPassengerOut(
                passengerId=p.id,
                title=p.title,
                firstName=p.first_name,
                lastName=p.last_name,
                dateOfBirth=p.date_of_birth,
                passportNumber=p.passport_number,
            )
            for p in passengers
        ],
    )


@router.get("/users/flight-bookings")
def my_flight_bookings(db: Session = Depends(get_db), me: User = Depends(get_current_user)):
    return list_flight_bookings(db, me.id)
