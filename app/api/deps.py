from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.core.errors import AuthenticationFailed
from app.core.security import decode_token
from app.models.user import User

bearer = HTTPBearer(auto_error=False)

def get_current_user(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
    db: Session = Depends(get_db),
) -> User:
    if not creds:
        raise AuthenticationFailed("Authentication required")
    try:
        payload = decode_token(creds.credentials)
    except JWTError:
        raise AuthenticationFailed("Invalid or expired token")
    user_id = payload.get("sub")
    user = db.get(User, user_id) if user_id else None
    if not user:
        # token outlived its user
        raise AuthenticationFailed("User not found")
    return user
