"""
Shared FastAPI dependencies.

``get_store`` hands endpoints the store created during application
startup.
"""

from fastapi import Request

from customer_api.app.core.store import CustomerStore


def get_store(request: Request) -> CustomerStore:
    """Return the store owned by the running application."""
    return request.app.state.store
