"""
Pydantic schema definitions for API payloads.

The same models are used for request bodies, response bodies and the
records held by the in‑memory store.
"""
