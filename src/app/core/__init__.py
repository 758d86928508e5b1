"""
Core module - Configuration, database, security, errors, and utilities.
"""

from app.core.config import Settings, get_settings
from app.core.database import Base, close_db, get_db, init_db
from app.core.errors import AppError, register_exception_handlers
from app.core.security import (
    TokenClaims,
    TokenService,
    hash_password,
    verify_password,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Database
    "Base",
    "get_db",
    "init_db",
    "close_db",
    # Errors
    "AppError",
    "register_exception_handlers",
    # Security
    "hash_password",
    "verify_password",
    "TokenClaims",
    "TokenService",
]
