from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.wishlist import WishlistItemIn
from app.services.wishlist_service import add_to_wishlist, remove_from_wishlist, list_wishlist

router = APIRouter(tags=["wishlist"])


@router.post("/users/wishlist", status_code=201)
def add_item(body: WishlistItemIn, db: Session = Depends(get_db),
             me: User = Depends(get_current_user)):
    if not body.packageId:
        raise HTTPException(status_code=400, detail="Package ID is required")
    item = add_to_wishlist(db, me.id, body.packageId)
    return {"message": "Package added to wishlist", "wishlistId": item.id, "packageId": item.package_id}


@router.delete("/users/wishlist")
def remove_item(body: WishlistItemIn, db: Session = Depends(get_db),
                me: User = Depends(get_current_user)):
    if not body.packageId:
        raise HTTPException(status_code=400, detail="Package ID is required")
    remove_from_wishlist(db, me.id, body.packageId)
    return {"message": "Package removed from wishlist"}


@router.get("/users/wishlist")
def my_wishlist(db: Session = Depends(get_db), me: User = Depends(get_current_user)):
    return [
        {
            "wishlistId": w.id,
            "packageId": p.id,
            "packageName": p.name,
            "location": p.location,
            "price": float(p.price),
            "duration": p.duration,
            "imageUrl": p.image_url,
        }
        for w, p in list_wishlist(db, me.id)
    ]
