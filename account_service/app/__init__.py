"""
Application package for the Account Service API.

``main`` builds the FastAPI app; ``core`` holds configuration, logging,
database access and shared types; ``schemas`` the pydantic models;
``services`` the lookups and the ``get_account`` operation; ``api`` the
versioned HTTP routes.
"""

from .main import app  # noqa: F401
