"""Pydantic Schemas: request/response contracts for the posts API.

Invariants:
    - Schemas validate shape at the system boundary; business rules stay in core/
    - Field names on the wire follow the public contract (imageURL, created_at, ...)
"""
