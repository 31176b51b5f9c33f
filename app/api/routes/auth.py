from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db.session import get_db
from app.schemas.auth import RegisterRequest, LoginRequest, AuthOut, UserOut
from app.models.user import User
from app.services.auth_service import register_user, authenticate
from app.api.deps import get_current_user

router = APIRouter(tags=["auth"])


def _user_out(u: User) -> UserOut:
    return UserOut(id=u.id, name=u.name, email=u.email)


@router.post("/auth/register", response_model=AuthOut, status_code=201)
def register(body: RegisterRequest, db: Session = Depends(get_db)):
    user, token = register_user(db, body.name, body.email, body.password, body.phone, body.address)
    return AuthOut(message="User registered successfully", token=token, user=_user_out(user))


@router.post("/auth/login", response_model=AuthOut)
def login(body: LoginRequest, db: Session = Depends(get_db)):
    user, token = authenticate(db, body.email, body.password)
    return AuthOut(message="Login successful", token=token, user=_user_out(user))


@router.get("/auth/me")
def me(me: User = Depends(get_current_user)):
    """Return the user the bearer token resolves to."""
    return {"user": _user_out(me).model_dump()}
