"""
Users router package.

Exports the router for user, email and friendship endpoints.
"""

from .users_router import router

__all__ = ["router"]
