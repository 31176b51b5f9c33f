from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import Conflict, NotFound
from app.models.package import Package
from app.models.review import ReviewRating
from app.models.user import User
from app.services.identifiers import allocate_id, REVIEW_PREFIX


def create_review(db: Session, user_id: str, package_id: str, rating: int, review_text: str) -> ReviewRating:
    if not db.get(Package, package_id):
        raise NotFound("Package not found")
    exists = db.query(ReviewRating).filter(
        ReviewRating.user_id == user_id, ReviewRating.package_id == package_id
    ).first()
    if exists:
        raise Conflict("You have already reviewed this package")

    review = ReviewRating(
        id=allocate_id(db, ReviewRating, REVIEW_PREFIX),
        user_id=user_id,
        package_id=package_id,
        review_text=review_text,
        rating=rating,
    )
    db.add(review)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("You have already reviewed this package")
    return review


def list_reviews(db: Session, package_id: str) -> list[tuple[ReviewRating, str]]:
    return (
        db.query(ReviewRating, User.name)
        .join(User, ReviewRating.user_id == User.id)
        .filter(ReviewRating.package_id == package_id)
        .order_by(ReviewRating.id.desc())
        .all()
    )
