from sqlalchemy import String, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base

class FlightPassenger(Base):
    __tablename__ = "flight_passengers"

    id: Mapped[str] = mapped_column(String(10), primary_key=True)  # FP + 7 digits
    booking_id: Mapped[str] = mapped_column(ForeignKey("flight_bookings.id"), index=True)
    seq: Mapped[int] = mapped_column(Integer, default=0)  # position in the booking request

    title: Mapped[str] = mapped_column(String(10), default="")
    first_name: Mapped[str] = mapped_column(String(100))
    last_name: Mapped[str] = mapped_column(String(100))
    date_of_birth: Mapped[str] = mapped_column(String(20), default="")  # YYYY-MM-DD, as submitted
    passport_number: Mapped[str] = mapped_column(String(40), default="")
