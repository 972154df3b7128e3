"""
Application package initializer.

The service is split into a few small pieces: ``core`` holds
configuration, logging and the in‑memory record store, ``schemas``
the pydantic models exchanged over HTTP, ``services`` the operations
performed against the store and ``api`` the versioned routers that
expose those operations.
"""

from .main import app  # noqa: F401
