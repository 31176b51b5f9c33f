from decimal import Decimal
from sqlalchemy import String, Integer, Date, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from datetime import date
from app.db.session import Base

class FlightBooking(Base):
    __tablename__ = "flight_bookings"

    id: Mapped[str] = mapped_column(String(10), primary_key=True)  # FB + 7 digits
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    outbound_flight_id: Mapped[str] = mapped_column(ForeignKey("flights.id"), index=True)
    return_flight_id: Mapped[str | None] = mapped_column(ForeignKey("flights.id"), nullable=True)
    booking_date: Mapped[date] = mapped_column(Date, default=date.today)
    number_of_passengers: Mapped[int] = mapped_column(Integer)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    payment_status: Mapped[str] = mapped_column(String(20), default="Pending")  # Pending, Refunded, Cancelled
