from decimal import Decimal
from sqlalchemy import String, Integer, DateTime, Numeric, ForeignKey, CheckConstraint
from sqlalchemy.orm import Mapped, mapped_column
from datetime import datetime
from app.db.session import Base

class Flight(Base):
    __tablename__ = "flights"
    __table_args__ = (
        CheckConstraint("available_seats >= 0", name="ck_flights_available_seats_non_negative"),
    )

    id: Mapped[str] = mapped_column(String(10), primary_key=True)
    flight_number: Mapped[str] = mapped_column(String(10))
    airline_id: Mapped[str] = mapped_column(ForeignKey("airlines.id"), index=True)
    departure_airport: Mapped[str] = mapped_column(ForeignKey("airports.code"), index=True)
    arrival_airport: Mapped[str] = mapped_column(ForeignKey("airports.code"), index=True)
    departure_time: Mapped[datetime] = mapped_column(DateTime, index=True)
    arrival_time: Mapped[datetime] = mapped_column(DateTime)
    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    # seat inventory; only the booking engine writes this
    available_seats: Mapped[int] = mapped_column(Integer)
