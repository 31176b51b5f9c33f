import logging
from datetime import datetime, timedelta, time
from decimal import Decimal

from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import ProgrammingError, OperationalError

from app.db.session import SessionLocal
from app.core.logging import configure_logging
from app.models.airport import Airport
from app.models.airline import Airline
from app.models.flight import Flight
from app.models.destination import Destination
from app.models.package import Package

logger = logging.getLogger(__name__)

AIRPORTS = [
    ("JFK", "John F. Kennedy International Airport", "New York", "United States"),
    ("LAX", "Los Angeles International Airport", "Los Angeles", "United States"),
    ("LHR", "Heathrow Airport", "London", "United Kingdom"),
    ("CDG", "Charles de Gaulle Airport", "Paris", "France"),
    ("DXB", "Dubai International Airport", "Dubai", "United Arab Emirates"),
    ("BOM", "Chhatrapati Shivaji Maharaj International Airport", "Mumbai", "India"),
    ("DEL", "Indira Gandhi International Airport", "Delhi", "India"),
    ("SIN", "Singapore Changi Airport", "Singapore", "Singapore"),
]

AIRLINES = [
    ("AL001", "SkyWays", None),
    ("AL002", "Oceanic Air", None),
    ("AL003", "Horizon Jet", None),
]

# (from, to, departure HH:MM, duration hours, price, seats, airline)
SCHEDULE = [
    ("JFK", "LHR", "08:00", 7, "540.00", 180, "AL001"),
    ("JFK", "LHR", "19:30", 7, "495.00", 180, "AL002"),
    ("LHR", "JFK", "10:15", 8, "520.00", 180, "AL001"),
    ("LHR", "CDG", "07:45", 1, "120.00", 150, "AL003"),
    ("CDG", "LHR", "18:00", 1, "115.00", 150, "AL003"),
    ("BOM", "DEL", "06:30", 2, "80.00", 160, "AL002"),
    ("DEL", "BOM", "21:00", 2, "85.00", 160, "AL002"),
    ("DXB", "SIN", "02:10", 7, "610.00", 200, "AL001"),
    ("SIN", "DXB", "23:40", 7, "590.00", 200, "AL001"),
    ("LAX", "JFK", "09:00", 5, "310.00", 170, "AL003"),
]

DESTINATIONS = [
    ("D001", "Paris", "France", "City of light, cafes and museums."),
    ("D002", "Bali", "Indonesia", "Beaches, temples and rice terraces."),
    ("D003", "Goa", "India", "Sun, sand and Portuguese heritage."),
]

PACKAGES = [
    ("PK0000001", "Paris Getaway", "D001", "Paris, France", "Five nights near the Louvre with a Seine cruise.", "1299.00", 5),
    ("PK0000002", "Bali Retreat", "D002", "Ubud, Bali", "Yoga retreat with rice terrace treks.", "899.00", 7),
    ("PK0000003", "Goa Beach Escape", "D003", "North Goa, India", "Beach resort stay with a spice plantation tour.", "499.00", 4),
]


def seed_catalog(db: Session, days: int = 30) -> None:
    """Insert demo airports, airlines, destinations, packages and `days` of flights. Idempotent."""
    for code, name, city, country in AIRPORTS:
        if not db.get(Airport, code):
            db.add(Airport(code=code, name=name, city=city, country=country))
    for aid, name, logo in AIRLINES:
        if not db.get(Airline, aid):
            db.add(Airline(id=aid, name=name, logo_url=logo))
    for did, name, location, description in DESTINATIONS:
        if not db.get(Destination, did):
            db.add(Destination(id=did, name=name, location=location, description=description))
    db.flush()
    for pid, name, did, location, description, price, duration in PACKAGES:
        if not db.get(Package, pid):
            db.add(Package(id=pid, name=name, destination_id=did, location=location,
                           description=description, price=Decimal(price), duration=duration))

    today = datetime.now().date()
    for day in range(days):
        flight_date = today + timedelta(days=day)
        for i, (src, dst, start, hours, price, seats, airline_id) in enumerate(SCHEDULE):
            fid = f"F{flight_date:%m%d}{i:02d}"
            if db.get(Flight, fid):
                continue
            dep = datetime.combine(flight_date, time.fromisoformat(start))
            db.add(Flight(
                id=fid,
                flight_number=f"{airline_id[-1]}X{100 + i}",
                airline_id=airline_id,
                departure_airport=src,
                arrival_airport=dst,
                departure_time=dep,
                arrival_time=dep + timedelta(hours=hours),
                base_price=Decimal(price),
                available_seats=seats,
            ))
    db.commit()


def run(db=None):
    if db is None:
        db = SessionLocal()
    try:
        # If migrations haven't been applied yet, seeding must not crash the API.
        try:
            db.execute(text("SELECT 1 FROM flights LIMIT 1"))
        except (ProgrammingError, OperationalError):
            db.rollback()
            logger.warning("flights table not found yet. Skipping seeding (run alembic upgrade head).")
            return
        seed_catalog(db)
        logger.info("seed complete")
    finally:
        db.close()


if __name__ == "__main__":
    configure_logging()
    run()
