from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.review import ReviewCreate
from app.services.review_service import create_review, list_reviews

router = APIRouter(tags=["reviews"])


@router.post("/reviews", status_code=201)
def submit_review(body: ReviewCreate, db: Session = Depends(get_db),
                  me: User = Depends(get_current_user)):
    if not body.packageId or body.rating is None or not body.reviewText:
        raise HTTPException(status_code=400, detail="Package ID, rating, and review text are required")
    r = create_review(db, me.id, body.packageId, body.rating, body.reviewText)
    return {
        "message": "Review submitted successfully",
        "reviewId": r.id,
        "packageId": r.package_id,
        "rating": r.rating,
        "reviewText": r.review_text,
    }


@router.get("/reviews")
def package_reviews(packageId: Optional[str] = None, db: Session = Depends(get_db)):
    if not packageId:
        raise HTTPException(status_code=400, detail="Package ID is required")
    return [
        {
            "reviewId": r.id,
            "packageId": r.package_id,
            "userId": r.user_id,
            "userName": user_name,
            "rating": r.rating,
            "reviewText": r.review_text,
        }
        for r, user_name in list_reviews(db, packageId)
    ]
