from decimal import Decimal
from sqlalchemy import String, Integer, Date, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from datetime import date
from app.db.session import Base

class Booking(Base):
    """Package booking. Package capacity is not modeled."""
    __tablename__ = "bookings"

    id: Mapped[str] = mapped_column(String(10), primary_key=True)  # BK + 7 digits
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    package_id: Mapped[str] = mapped_column(ForeignKey("packages.id"), index=True)
    booking_date: Mapped[date] = mapped_column(Date, default=date.today)
    travel_date: Mapped[date] = mapped_column(Date)
    number_of_travelers: Mapped[int] = mapped_column(Integer)
    total_amount: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    payment_status: Mapped[str] = mapped_column(String(20), default="Pending")  # Pending, Cancelled
