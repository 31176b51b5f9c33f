from decimal import Decimal
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from sqlalchemy import func, or_
from app.db.session import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.models.airport import Airport
from app.models.destination import Destination
from app.models.package import Package
from app.schemas.package import PackageCreate
from app.services.identifiers import allocate_id, PACKAGE_PREFIX

router = APIRouter(tags=["catalog"])

AIRPORT_SEARCH_LIMIT = 10


def destination_out(d: Destination) -> dict:
    return {
        "destinationId": d.id,
        "name": d.name,
        "location": d.location,
        "description": d.description,
        "imageUrl": d.image_url,
    }


def package_out(p: Package) -> dict:
    return {
        "packageId": p.id,
        "packageName": p.name,
        "destinationId": p.destination_id,
        "location": p.location,
        "description": p.description,
        "price": float(p.price),
        "duration": p.duration,
        "imageUrl": p.image_url,
    }


def _contains(column, term: str):
    # user input is literal text, not a LIKE pattern
    term = term.lower().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return func.lower(column).like(f"%{term}%", escape="\\")


@router.get("/destinations")
def list_destinations(db: Session = Depends(get_db)):
    return [destination_out(d) for d in db.query(Destination).order_by(Destination.id).all()]


@router.get("/destinations/{destination_id}")
def get_destination(destination_id: str, db: Session = Depends(get_db)):
    d = db.get(Destination, destination_id)
    if not d:
        raise HTTPException(status_code=404, detail="Destination not found")
    return destination_out(d)


@router.get("/packages")
def list_packages(destinationId: Optional[str] = None, db: Session = Depends(get_db)):
    q = db.query(Package)
    if destinationId:
        q = q.filter(Package.destination_id == destinationId)
    return [package_out(p) for p in q.order_by(Package.id).all()]


@router.get("/packages/{package_id}")
def get_package(package_id: str, db: Session = Depends(get_db)):
    p = db.get(Package, package_id)
    if not p:
        raise HTTPException(status_code=404, detail="Package not found")
    return package_out(p)


@router.post("/packages", status_code=201)
def create_package(body: PackageCreate, db: Session = Depends(get_db),
                   me: User = Depends(get_current_user)):
    if body.destinationId and not db.get(Destination, body.destinationId):
        raise HTTPException(status_code=404, detail="Destination not found")
    p = Package(
        id=allocate_id(db, Package, PACKAGE_PREFIX),
        name=body.name,
        destination_id=body.destinationId,
        location=body.location,
        description=body.description,
        price=Decimal(str(body.price)),
        duration=body.duration,
        image_url=body.imageUrl,
    )
    db.add(p)
    db.commit()
    db.refresh(p)
    return {"message": "Package created successfully", **package_out(p)}


@router.get("/airports/search")
def search_airports(query: str = "", db: Session = Depends(get_db)):
    """Substring match on code, name, city and country. Fewer than 2 characters returns nothing."""
    if len(query.strip()) < 2:
        return []
    term = query.strip()
    rows = (
        db.query(Airport)
        .filter(or_(
            _contains(Airport.code, term),
            _contains(Airport.name, term),
            _contains(Airport.city, term),
            _contains(Airport.country, term),
        ))
        .order_by(Airport.code)
        .limit(AIRPORT_SEARCH_LIMIT)
        .all()
    )
    return [{"airportCode": a.code, "name": a.name, "city": a.city, "country": a.country} for a in rows]


@router.get("/search")
def search(q: str = "", db: Session = Depends(get_db)):
    if not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")
    term = q.strip()
    packages = db.query(Package).filter(or_(
        _contains(Package.name, term),
        _contains(Package.location, term),
        _contains(Package.description, term),
    )).order_by(Package.id).all()
    destinations = db.query(Destination).filter(or_(
        _contains(Destination.name, term),
        _contains(Destination.location, term),
        _contains(Destination.description, term),
    )).order_by(Destination.id).all()
    return {
        "packages": [package_out(p) for p in packages],
        "destinations": [destination_out(d) for d in destinations],
    }
