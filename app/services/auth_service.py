import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import AuthenticationFailed, Conflict, ValidationError
from app.core.security import hash_password, verify_password, create_access_token
from app.models.user import User
from app.services.identifiers import allocate_id, USER_PREFIX, USER_DIGITS

logger = logging.getLogger(__name__)


def register_user(db: Session, name: str, email: str, password: str,
                  phone: str | None = None, address: str | None = None) -> tuple[User, str]:
    if not name or not email or not password:
        raise ValidationError("Name, email, and password are required")
    email_l = email.strip().lower()
    if db.query(User).filter(User.email == email_l).first():
        raise Conflict("User with this email already exists")

    user = User(
        id=allocate_id(db, User, USER_PREFIX, USER_DIGITS),
        name=name,
        email=email_l,
        phone_number=phone or None,
        address=address or None,
        password_hash=hash_password(password),
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # another request registered the same email after the check above
        db.rollback()
        raise Conflict("User with this email already exists")
    logger.info("registered user %s", user.id)
    return user, create_access_token(user.id)


def authenticate(db: Session, email: str, password: str) -> tuple[User, str]:
    if not email or not password:
        raise ValidationError("Email and password are required")
    user = db.query(User).filter(User.email == email.strip().lower()).first()
    if not user or not verify_password(password, user.password_hash):
        logger.info("failed login attempt")
        raise AuthenticationFailed("Invalid credentials")
    return user, create_access_token(user.id)
