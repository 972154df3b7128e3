"""
Service layer for customers.

Each operation takes the shared :class:`CustomerStore`, acquires it
exactly once, performs a single linear scan plus at most one mutation,
and reports the result as a :class:`CustomerResult`.  No operation
returns a reference into the store: records are copied out while the
store is held, and records coming in are copied before they are
stored.

Conflicts and missing records are ordinary outcomes rather than
exceptions; the API layer decides which status code each one maps to.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import List, Optional

from customer_api.app.core.store import CustomerStore
from customer_api.app.schemas.customer import Customer

logger = logging.getLogger(__name__)


class Outcome(enum.Enum):
    """Closed set of results an operation can produce."""

    OK = "ok"
    CREATED = "created"
    UPDATED = "updated"
    DELETED = "deleted"
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class CustomerResult:
    """Outcome of an operation plus any data copied out of the store."""

    outcome: Outcome
    customer: Optional[Customer] = None
    customers: Optional[List[Customer]] = None

    @property
    def ok(self) -> bool:
        return self.outcome not in (Outcome.CONFLICT, Outcome.NOT_FOUND)


class CustomerService:
    """Service class for the customer operations."""

    @classmethod
    async def list_customers(cls, store: CustomerStore) -> CustomerResult:
        """Return a copy of every customer, in insertion order.

        Always succeeds.  Later mutations of the store are not visible
        through the returned list.
        """
        async with store.acquire() as customers:
            snapshot = [customer.model_copy() for customer in customers]
        return CustomerResult(Outcome.OK, customers=snapshot)

    @classmethod
    async def create_customer(cls, store: CustomerStore, new_customer: Customer) -> CustomerResult:
        """Append ``new_customer`` unless its ``guid`` is already taken.

        A duplicate ``guid`` leaves the store untouched and yields
        ``CONFLICT`` no matter how many times it is retried.
        """
        async with store.acquire() as customers:
            for customer in customers:
                if customer.guid == new_customer.guid:
                    logger.info("Rejected customer %s: guid already exists", new_customer.guid)
                    return CustomerResult(Outcome.CONFLICT)
            customers.append(new_customer.model_copy())
        logger.info("Created customer %s", new_customer.guid)
        return CustomerResult(Outcome.CREATED)

    @classmethod
    async def get_customer(cls, store: CustomerStore, guid: str) -> CustomerResult:
        """Return a copy of the customer with ``guid``."""
        async with store.acquire() as customers:
            for customer in customers:
                if customer.guid == guid:
                    return CustomerResult(Outcome.OK, customer=customer.model_copy())
        return CustomerResult(Outcome.NOT_FOUND)

    @classmethod
    async def update_customer(cls, store: CustomerStore, updated_customer: Customer) -> CustomerResult:
        """Replace the record whose ``guid`` matches ``updated_customer.guid``.

        The whole record is overwritten (no field merging) and keeps its
        position in the sequence.
        """
        async with store.acquire() as customers:
            for index, customer in enumerate(customers):
                if customer.guid == updated_customer.guid:
                    customers[index] = updated_customer.model_copy()
                    logger.info("Updated customer %s", updated_customer.guid)
                    return CustomerResult(Outcome.UPDATED)
        logger.info("Update skipped: customer %s not found", updated_customer.guid)
        return CustomerResult(Outcome.NOT_FOUND)

    @classmethod
    async def delete_customer(cls, store: CustomerStore, guid: str) -> CustomerResult:
        """Remove every record with ``guid`` (at most one by invariant)."""
        async with store.acquire() as customers:
            before = len(customers)
            # Rebuild in place so the store keeps owning the same list object.
            customers[:] = [customer for customer in customers if customer.guid != guid]
            deleted = len(customers) != before
        if deleted:
            logger.info("Deleted customer %s", guid)
            return CustomerResult(Outcome.DELETED)
        logger.info("Delete skipped: customer %s not found", guid)
        return CustomerResult(Outcome.NOT_FOUND)
