"""Pydantic Schemas: request/response validation for API endpoints.

Invariants:
    - Request schemas forbid unknown fields (extra="forbid")
    - Update schemas are all-optional; routes apply only fields the client sent
    - Response schemas read ORM rows directly (from_attributes)
"""
