"""Authentication module."""

from app.modules.auth.router import router
from app.modules.auth.schemas import LoginRequest, LoginResponse, RegisterRequest, RegisterResponse

__all__ = ["router", "LoginRequest", "LoginResponse", "RegisterRequest", "RegisterResponse"]
