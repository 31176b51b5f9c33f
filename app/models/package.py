from decimal import Decimal
from sqlalchemy import String, Integer, Text, Numeric, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base

class Package(Base):
    __tablename__ = "packages"

    id: Mapped[str] = mapped_column(String(10), primary_key=True)
    name: Mapped[str] = mapped_column(String(200))
    destination_id: Mapped[str | None] = mapped_column(ForeignKey("destinations.id"), nullable=True, index=True)
    location: Mapped[str] = mapped_column(String(200), default="")
    description: Mapped[str] = mapped_column(Text, default="")
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    duration: Mapped[int] = mapped_column(Integer, default=1)  # days
    image_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
