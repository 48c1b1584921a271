"""
Auth Module - accounts, roles and bearer tokens.
"""

from forum_app.modules.auth.identity import IdentityManager, IdentityResult
from forum_app.modules.auth.service import AuthService

__all__ = ["AuthService", "IdentityManager", "IdentityResult"]
