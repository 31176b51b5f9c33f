"""
Duplicate writes that slip past the existence check still surface as 409.

A second session commits the conflicting row from inside ``before_flush``,
after the service has looked for it and before its own INSERT runs.
"""

import pytest
from sqlalchemy import event, func, select

from app.core.errors import Conflict
from app.models.review import ReviewRating
from app.models.user import User
from app.models.wishlist import Wishlist
from app.services.review_service import create_review
from app.services.wishlist_service import add_to_wishlist


def _commit_first(target, session_factory, make_row):
    def racer(session, flush_context, instances):
        other = session_factory()
        try:
            other.add(make_row())
            other.commit()
        finally:
            other.close()

    event.listen(target, "before_flush", racer, once=True)


def _count(db, model, *where):
    db.expire_all()
    return db.execute(select(func.count()).select_from(model).where(*where)).scalar_one()


def test_register_race_is_conflict(client, session_factory, db):
    _commit_first(session_factory, session_factory, lambda: User(
        id="U999999", name="Early Bird", email="race@example.com", password_hash="x",
    ))

    r = client.post("/api/auth/register", json={
        "name": "Late Comer", "email": "race@example.com", "password": "pw123456",
    })
    assert r.status_code == 409
    assert r.json() == {"message": "User with this email already exists"}
    assert _count(db, User, User.email == "race@example.com") == 1


def test_review_race_is_conflict(catalog, user, session_factory):
    db = catalog
    _commit_first(db, session_factory, lambda: ReviewRating(
        id="REV9999999", user_id="U000001", package_id="PK0000001", review_text="first", rating=4,
    ))

    with pytest.raises(Conflict):
        create_review(db, "U000001", "PK0000001", 5, "second")
    assert _count(db, ReviewRating, ReviewRating.user_id == "U000001") == 1


def test_wishlist_race_is_conflict(catalog, user, session_factory):
    db = catalog
    _commit_first(db, session_factory, lambda: Wishlist(
        id="WL9999999", user_id="U000001", package_id="PK0000002",
    ))

    with pytest.raises(Conflict):
        add_to_wishlist(db, "U000001", "PK0000002")
    assert _count(db, Wishlist, Wishlist.user_id == "U000001") == 1
