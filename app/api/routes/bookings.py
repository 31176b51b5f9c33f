from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.api.deps import get_current_user
from app.api.routes.catalog import package_out
from app.models.user import User
from app.models.booking import Booking
from app.schemas.booking import BookingCreate, BookingOut
from app.services.booking_service import (
    create_package_booking,
    get_package_booking,
    cancel_package_booking,
    list_package_bookings,
)

router = APIRouter(tags=["bookings"])


def _booking_out(b: Booking) -> dict:
    return {
        "bookingId": b.id,
        "packageId": b.package_id,
        "bookingDate": b.booking_date.isoformat(),
        "travelDate": b.travel_date.isoformat(),
        "numberOfTravelers": b.number_of_travelers,
        "totalAmount": float(b.total_amount),
        "paymentStatus": b.payment_status,
    }


@router.post("/bookings", response_model=BookingOut, status_code=201)
def create_booking(body: BookingCreate, db: Session = Depends(get_db),
                   me: User = Depends(get_current_user)):
    if not body.packageId or not body.travelDate or not body.travelers:
        raise HTTPException(status_code=400, detail="Package ID, travel date, and number of travelers are required")
    b = create_package_booking(db, me.id, body.packageId, body.travelDate, body.travelers)
    return BookingOut(
        bookingId=b.id,
        packageId=b.package_id,
        travelDate=b.travel_date.isoformat(),
        travelers=b.number_of_travelers,
        totalAmount=float(b.total_amount),
    )


@router.get("/bookings/{booking_id}")
def get_booking(booking_id: str, db: Session = Depends(get_db),
                me: User = Depends(get_current_user)):
    b, package, payment = get_package_booking(db, me.id, booking_id)
    return {
        "booking": _booking_out(b),
        "package": package_out(package) if package else None,
        "payment": {
            "paymentId": payment.id,
            "amount": float(payment.amount),
            "paymentStatus": payment.payment_status,
            "paymentDate": payment.payment_date.isoformat() if payment.payment_date else None,
        } if payment else None,
    }


@router.put("/bookings/{booking_id}/cancel")
def cancel_booking(booking_id: str, db: Session = Depends(get_db),
                   me: User = Depends(get_current_user)):
    cancel_package_booking(db, me.id, booking_id)
    return {"message": "Booking cancelled successfully"}


@router.get("/users/bookings")
def my_bookings(db: Session = Depends(get_db), me: User = Depends(get_current_user)):
    return [
        {**_booking_out(b), "packageName": p.name, "location": p.location, "imageUrl": p.image_url}
        for b, p in list_package_bookings(db, me.id)
    ]
