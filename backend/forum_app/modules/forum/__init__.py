"""
Forum Module - Community discussions.

Features:
- Threads with title search and pagination
- Posts and replies
- Ownership checks (author or Admin)
- Cascading deletes (thread -> posts -> replies)
"""

from forum_app.modules.forum.posts import PostService
from forum_app.modules.forum.threads import ThreadService

__all__ = ["PostService", "ThreadService"]
