"""
Endpoint modules for API v1.

Each module defines an ``APIRouter``; they are combined in
``api/v1/router.py``.
"""
