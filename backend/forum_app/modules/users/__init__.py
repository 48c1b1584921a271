"""
Users Module - account administration for Admins.
"""

from forum_app.modules.users.service import UserService

__all__ = ["UserService"]
