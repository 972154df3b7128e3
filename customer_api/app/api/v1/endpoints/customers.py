"""
Customer endpoints for API v1.

These routes expose CRUD operations over the in‑memory customer
store.  Each route calls exactly one :class:`CustomerService`
operation and translates its :class:`Outcome` into a status code:
conflicts become 400 and missing records 404.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from customer_api.app.api.deps import get_store
from customer_api.app.core.store import CustomerStore
from customer_api.app.schemas.customer import Customer
from customer_api.app.services.customer_service import CustomerResult, CustomerService, Outcome

router = APIRouter()

logger = logging.getLogger(__name__)

_STATUS_BY_OUTCOME = {
    Outcome.OK: status.HTTP_200_OK,
    Outcome.CREATED: status.HTTP_201_CREATED,
    Outcome.UPDATED: status.HTTP_200_OK,
    Outcome.DELETED: status.HTTP_204_NO_CONTENT,
    Outcome.CONFLICT: status.HTTP_400_BAD_REQUEST,
    Outcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
}

_DETAIL_BY_OUTCOME = {
    Outcome.CONFLICT: "Customer already exists",
    Outcome.NOT_FOUND: "Customer not found",
}


def _raise_for_outcome(result: CustomerResult) -> None:
    if not result.ok:
        raise HTTPException(
            status_code=_STATUS_BY_OUTCOME[result.outcome],
            detail=_DETAIL_BY_OUTCOME[result.outcome],
        )


@router.get("", response_model=List[Customer])
async def list_customers(store: CustomerStore = Depends(get_store)) -> List[Customer]:
    """Return every customer in insertion order."""
    result = await CustomerService.list_customers(store)
    return result.customers


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "A customer with this guid already exists"}},
)
async def create_customer(
    customer_in: Customer,
    store: CustomerStore = Depends(get_store),
) -> Response:
    """Create a customer.  The client supplies the ``guid``."""
    result = await CustomerService.create_customer(store, customer_in)
    _raise_for_outcome(result)
    return Response(status_code=_STATUS_BY_OUTCOME[result.outcome])


@router.get("/{guid}", response_model=Customer, responses={404: {"description": "Customer not found"}})
async def get_customer(guid: str, store: CustomerStore = Depends(get_store)) -> Customer:
    """Retrieve a single customer by ``guid``."""
    result = await CustomerService.get_customer(store, guid)
    _raise_for_outcome(result)
    return result.customer


@router.put(
    "/{guid}",
    responses={404: {"description": "Customer not found"}},
)
async def update_customer(
    guid: str,
    customer_in: Customer,
    store: CustomerStore = Depends(get_store),
) -> Response:
    """Replace an existing customer.

    The record is looked up by the ``guid`` in the body; the path
    segment is not used for the lookup.
    """
    if guid != customer_in.guid:
        logger.warning(
            "PUT path guid %s differs from body guid %s; using body guid",
            guid,
            customer_in.guid,
        )
    result = await CustomerService.update_customer(store, customer_in)
    _raise_for_outcome(result)
    return Response(status_code=_STATUS_BY_OUTCOME[result.outcome])


@router.delete(
    "/{guid}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={404: {"description": "Customer not found"}},
)
async def delete_customer(guid: str, store: CustomerStore = Depends(get_store)) -> Response:
    """Delete a customer by ``guid``."""
    result = await CustomerService.delete_customer(store, guid)
    _raise_for_outcome(result)
    return Response(status_code=_STATUS_BY_OUTCOME[result.outcome])
