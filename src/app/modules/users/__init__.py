"""
Users module - User accounts, credential store and user queries.
"""

from app.modules.users.models import User
from app.modules.users.repository import UserRepository

__all__ = ["User", "UserRepository"]
