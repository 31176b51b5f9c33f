import os

os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.session import get_db
from app.core.security import hash_password
from app.main import app
from app.models.airline import Airline
from app.models.airport import Airport
from app.models.destination import Destination
from app.models.flight import Flight
from app.models.package import Package
from app.models.user import User

OUT_DAY = datetime(2026, 11, 1, 10, 0)
RET_DAY = datetime(2026, 11, 8, 12, 0)


def add_flight(db, fid, price, seats, src="JFK", dst="LHR", departs=OUT_DAY, airline_id="AL001"):
    flight = Flight(
        id=fid,
        flight_number=f"SK{fid[-3:]}",
        airline_id=airline_id,
        departure_airport=src,
        arrival_airport=dst,
        departure_time=departs,
        arrival_time=departs.replace(hour=departs.hour + 2),
        base_price=Decimal(str(price)),
        available_seats=seats,
    )
    db.add(flight)
    return flight


def passenger(first="Ada", last="Lovelace", **extra):
    return {
        "title": extra.get("title", "Ms"),
        "firstName": first,
        "lastName": last,
        "dateOfBirth": extra.get("dateOfBirth", "1990-01-01"),
        "passportNumber": extra.get("passportNumber", "P1234567"),
    }


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def catalog(db):
    """Airports, one airline, a destination and a package. Flights are added per test."""
    db.add_all([
        Airport(code="JFK", name="John F. Kennedy International Airport", city="New York", country="United States"),
        Airport(code="LHR", name="Heathrow Airport", city="London", country="United Kingdom"),
        Airport(code="CDG", name="Charles de Gaulle Airport", city="Paris", country="France"),
        Airline(id="AL001", name="SkyWays", logo_url="https://example.test/skyways.png"),
        Destination(id="D001", name="Paris", location="France", description="City of light"),
        Destination(id="D002", name="Bali", location="Indonesia", description="Beaches and temples"),
    ])
    db.flush()
    db.add_all([
        Package(id="PK0000001", name="Paris Getaway", destination_id="D001", location="Paris, France",
                description="Five nights near the Louvre", price=Decimal("500.00"), duration=5),
        Package(id="PK0000002", name="Bali Retreat", destination_id="D002", location="Ubud, Bali",
                description="Yoga and rice terraces", price=Decimal("899.00"), duration=7),
    ])
    db.commit()
    return db


@pytest.fixture
def user(db):
    u = User(id="U000001", name="Grace Hopper", email="grace@example.com", password_hash=hash_password("secret123"))
    db.add(u)
    db.commit()
    return u


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    r = client.post("/api/auth/register", json={
        "name": "Alan Turing", "email": "alan@example.com", "password": "enigma42",
    })
    assert r.status_code == 201
    return {"Authorization": f"Bearer {r.json()['token']}"}
