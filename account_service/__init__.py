"""
Top-level package for the Account Service API.

All functionality lives in the ``app`` subpackage, e.g.
``account_service.app.main``.
"""

__all__ = []
