"""Infrastructure Layer: external service clients and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from api/ or services/
    - Every external failure is mapped onto the core/errors.py hierarchy
"""
