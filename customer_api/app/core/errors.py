"""
Exception types raised by the core package.

Per‑request outcomes (conflict, not found) are not exceptions; they
are reported through :class:`~customer_api.app.services.customer_service.Outcome`.
The exceptions here are reserved for conditions that must stop the
application.
"""


class CustomerAPIError(Exception):
    """Base class for application errors."""


class SnapshotError(CustomerAPIError):
    """The seed snapshot exists but could not be loaded.

    Raised during startup.  The application must not serve requests
    with an empty or partially loaded store when this happens.
    """

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot load customer snapshot {path}: {reason}")
        self.path = path
        self.reason = reason
