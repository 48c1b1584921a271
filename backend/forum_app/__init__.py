"""
Forum backend: threads, posts, replies and role-based access.
"""

__version__ = "1.0.0"
