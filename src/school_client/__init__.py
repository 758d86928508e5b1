"""
School Management client.

Token lifecycle management, an authenticated async API client and
view-level route gating for applications that consume the School
Management API.
"""

from school_client.api import SchoolApiClient
from school_client.errors import ApiError
from school_client.manager import BearerAuth, TokenManager
from school_client.routing import Redirect, Rendered, ViewRouter
from school_client.session import AuthSession
from school_client.storage import FileTokenStorage, MemoryTokenStorage, TokenStorage
from school_client.tokens import TimeRemaining, decode_token, is_token_expired

__all__ = [
    "ApiError",
    "AuthSession",
    "BearerAuth",
    "FileTokenStorage",
    "MemoryTokenStorage",
    "Redirect",
    "Rendered",
    "SchoolApiClient",
    "TimeRemaining",
    "TokenManager",
    "TokenStorage",
    "ViewRouter",
    "decode_token",
    "is_token_expired",
]
