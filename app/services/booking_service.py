import logging
from datetime import date
from sqlalchemy.orm import Session

from app.core.errors import NotFound, ValidationError
from app.models.booking import Booking
from app.models.package import Package
from app.models.payment import Payment
from app.services.identifiers import allocate_id, PACKAGE_BOOKING_PREFIX

logger = logging.getLogger(__name__)

PENDING = "Pending"
CANCELLED = "Cancelled"
REFUNDED = "Refunded"


def create_package_booking(db: Session, user_id: str, package_id: str, travel_date: date, travelers: int) -> Booking:
    if travelers < 1:
        raise ValidationError("travelers must be >= 1")
    package = db.get(Package, package_id)
    if not package:
        raise NotFound("Package not found")

    booking = Booking(
        id=allocate_id(db, Booking, PACKAGE_BOOKING_PREFIX),
        user_id=user_id,
        package_id=package.id,
        travel_date=travel_date,
        number_of_travelers=travelers,
        total_amount=package.price * travelers,
        payment_status=PENDING,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    logger.info("package booking %s created for %s", booking.id, package.id)
    return booking


def _get_own_booking(db: Session, user_id: str, booking_id: str) -> Booking:
    b = db.query(Booking).filter(Booking.id == booking_id, Booking.user_id == user_id).first()
    if not b:
        raise NotFound("Booking not found")
    return b


def get_package_booking(db: Session, user_id: str, booking_id: str) -> tuple[Booking, Package | None, Payment | None]:
    b = _get_own_booking(db, user_id, booking_id)
    package = db.get(Package, b.package_id)
    payment = db.query(Payment).filter(Payment.booking_id == b.id).first()
    return b, package, payment


def cancel_package_booking(db: Session, user_id: str, booking_id: str) -> Booking:
    b = _get_own_booking(db, user_id, booking_id)
    if b.payment_status == CANCELLED:
        raise ValidationError("Booking is already cancelled")
    b.payment_status = CANCELLED
    db.query(Payment).filter(Payment.booking_id == b.id).update(
        {Payment.payment_status: REFUNDED}, synchronize_session=False
    )
    db.commit()
    logger.info("package booking %s cancelled", b.id)
    return b


def list_package_bookings(db: Session, user_id: str) -> list[tuple[Booking, Package]]:
    return (
        db.query(Booking, Package)
        .join(Package, Booking.package_id == Package.id)
        .filter(Booking.user_id == user_id)
        .order_by(Booking.booking_date.desc(), Booking.id.desc())
        .all()
    )
