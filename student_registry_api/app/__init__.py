"""
Application package initializer.

The project is split into a storage service that owns all data and
business rules (``services``), pydantic schemas describing request and
response bodies (``schemas``) and a thin HTTP layer (``api``) that maps
requests onto storage calls.
"""

from .main import app  # noqa: F401
