from pydantic import BaseModel, Field
from typing import Optional

class RegisterRequest(BaseModel):
    name: str = Field("", max_length=200)
    email: str = Field("", max_length=320)  # plain str to allow .local and other dev domains
    password: str = Field("", max_length=128)
    phone: Optional[str] = Field(None, max_length=40)
    address: Optional[str] = Field(None, max_length=500)

class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""

class UserOut(BaseModel):
    id: str
    name: str
    email: str

class AuthOut(BaseModel):
    message: str
    token: str
    user: UserOut
