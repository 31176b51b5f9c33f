from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import Conflict, NotFound
from app.models.package import Package
from app.models.wishlist import Wishlist
from app.services.identifiers import allocate_id, WISHLIST_PREFIX


def add_to_wishlist(db: Session, user_id: str, package_id: str) -> Wishlist:
    if not db.get(Package, package_id):
        raise NotFound("Package not found")
    exists = db.query(Wishlist).filter(Wishlist.user_id == user_id, Wishlist.package_id == package_id).first()
    if exists:
        raise Conflict("Package already in wishlist")
    item = Wishlist(id=allocate_id(db, Wishlist, WISHLIST_PREFIX), user_id=user_id, package_id=package_id)
    db.add(item)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise Conflict("Package already in wishlist")
    return item


def remove_from_wishlist(db: Session, user_id: str, package_id: str) -> int:
    n = db.query(Wishlist).filter(Wishlist.user_id == user_id, Wishlist.package_id == package_id).delete(
        synchronize_session=False
    )
    db.commit()
    return n


def list_wishlist(db: Session, user_id: str) -> list[tuple[Wishlist, Package]]:
    return (
        db.query(Wishlist, Package)
        .join(Package, Wishlist.package_id == Package.id)
        .filter(Wishlist.user_id == user_id)
        .all()
    )
