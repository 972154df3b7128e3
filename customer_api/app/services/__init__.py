"""
Service layer abstraction.

Each service encapsulates the operations for a domain.  Services
receive the store they operate on from the caller, so handlers stay
free of HTTP concerns and can be exercised directly in tests.
"""
