"""HTTP routes of the signup service."""

from src.api.routes.signup import router as signup_router

__all__ = ["signup_router"]
