"""Authentication related schemas."""

from pydantic import BaseModel, EmailStr, Field

from .user import UserRead


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginData(BaseModel):
    user: UserRead
    token: str
    refresh_token: str


class LoginResponse(BaseModel):
    success: bool = True
    message: str
    data: LoginData


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class RefreshData(BaseModel):
    token: str


class ForgotPasswordRequest(BaseModel):
    email: EmailStr = Field(..., description="Correo electrónico registrado del usuario")


__all__ = [
    "ForgotPasswordRequest",
    "LoginData",
    "LoginRequest",
    "LoginResponse",
    "RefreshData",
    "RefreshRequest",
]
