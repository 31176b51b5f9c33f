import random
from sqlalchemy.orm import Session

MAX_ATTEMPTS = 10

USER_PREFIX, USER_DIGITS = "U", 6
FLIGHT_BOOKING_PREFIX = "FB"
FLIGHT_PASSENGER_PREFIX = "FP"
PACKAGE_BOOKING_PREFIX = "BK"
PACKAGE_PREFIX = "PK"
REVIEW_PREFIX = "REV"
WISHLIST_PREFIX = "WL"


def make_id(prefix: str, digits: int = 7) -> str:
    """Prefix + zero-padded random digits, e.g. FB0042137."""
    return prefix + str(random.randrange(10 ** digits)).zfill(digits)


def allocate_id(db: Session, model, prefix: str, digits: int = 7, taken: set[str] | None = None) -> str:
    """Return an id for `model` that is not yet in the store (nor in `taken`).

    The primary key still enforces uniqueness; this only keeps a collision from
    failing the whole transaction.
    """
    for _ in range(MAX_ATTEMPTS):
        candidate = make_id(prefix, digits)
        if taken and candidate in taken:
            continue
        if db.get(model, candidate) is None:
            return candidate
    raise RuntimeError(f"could not allocate {model.__tablename__} id")
