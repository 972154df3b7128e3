"""
In‑memory customer store.

The store owns the ordered list of customer records and a single
``asyncio.Lock``.  All access goes through :meth:`CustomerStore.acquire`,
which grants exclusive read/write access for the duration of one
operation.  There is no shared read mode: listing takes the same lock
as a write, which keeps the locking discipline uniform.

The store is seeded once at startup from a JSON snapshot (see
:meth:`CustomerStore.from_snapshot`) and is never written back to disk.
"""

from __future__ import annotations

import asyncio
import json
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Iterable, List, Optional, Union

from pydantic import TypeAdapter, ValidationError

from customer_api.app.core.errors import SnapshotError
from customer_api.app.schemas.customer import Customer

logger = logging.getLogger(__name__)

_customer_list = TypeAdapter(List[Customer])


def load_snapshot(path: Union[str, Path]) -> List[Customer]:
    """Parse the snapshot file at ``path`` into a list of customers.

    The file must contain a JSON array of customer objects with
    distinct ``guid`` values.  Order is preserved.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.  Callers decide whether that is
        acceptable.
    SnapshotError
        If the file exists but cannot be read or parsed, or if two
        records share a ``guid``.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise
    except (OSError, UnicodeDecodeError) as exc:
        raise SnapshotError(str(path), f"unreadable ({exc})") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise SnapshotError(str(path), f"invalid JSON ({exc})") from exc

    if not isinstance(data, list):
        raise SnapshotError(str(path), "expected a JSON array of customers")

    try:
        customers = _customer_list.validate_python(data)
    except ValidationError as exc:
        raise SnapshotError(
            str(path), f"{exc.error_count()} invalid customer field(s)"
        ) from exc

    seen = set()
    for customer in customers:
        if customer.guid in seen:
            raise SnapshotError(str(path), f"duplicate guid {customer.guid!r}")
        seen.add(customer.guid)
    return customers


class CustomerStore:
    """Ordered, lock‑guarded collection of :class:`Customer` records."""

    def __init__(self, customers: Optional[Iterable[Customer]] = None) -> None:
        self._customers: List[Customer] = list(customers or [])
        self._lock = asyncio.Lock()

    @classmethod
    def from_snapshot(cls, path: Union[str, Path]) -> "CustomerStore":
        """Build a store seeded from ``path``.

        A missing file yields an empty store.  A file that exists but
        cannot be loaded raises :class:`SnapshotError`; there is no
        fallback to an empty store in that case.
        """
        try:
            customers = load_snapshot(path)
        except FileNotFoundError:
            logger.info("No customer snapshot at %s, starting with an empty store", path)
            return cls()
        logger.info("Loaded %d customer(s) from %s", len(customers), path)
        return cls(customers)

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[List[Customer]]:
        """Hold the store exclusively and yield the underlying list.

        The lock is released on every exit path, including exceptions
        and task cancellation.  Callers must not keep references to the
        yielded list or its items after the block ends.
        """
        async with self._lock:
            yield self._customers

    @property
    def locked(self) -> bool:
        """True while some operation holds the handle."""
        return self._lock.locked()
