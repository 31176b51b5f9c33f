from sqlalchemy import String, Integer, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column
from app.db.session import Base

class ReviewRating(Base):
    __tablename__ = "review_ratings"
    __table_args__ = (
        UniqueConstraint("user_id", "package_id", name="uq_review_user_package"),
    )

    id: Mapped[str] = mapped_column(String(10), primary_key=True)  # REV + 7 digits
    user_id: Mapped[str] = mapped_column(ForeignKey("users.id"), index=True)
    package_id: Mapped[str] = mapped_column(ForeignKey("packages.id"), index=True)
    review_text: Mapped[str] = mapped_column(Text)
    rating: Mapped[int] = mapped_column(Integer)
