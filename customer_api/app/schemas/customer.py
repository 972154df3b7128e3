"""
Pydantic schema for customer records.

A customer is identified by ``guid``, which the client chooses.  The
remaining fields are free‑form strings; no format validation is
applied to the email or address.
"""

from pydantic import BaseModel, Field


class Customer(BaseModel):
    """A customer record as stored and exchanged over the API."""

    guid: str = Field(..., examples=["6b1f4e2a-93a0-4c41-9a57-6a0d1b7e1c55"])
    first_name: str = Field(..., examples=["Jane"])
    last_name: str = Field(..., examples=["Doe"])
    email: str = Field(..., examples=["jane.doe@example.com"])
    address: str = Field(..., examples=["1 Main St, Springfield"])
