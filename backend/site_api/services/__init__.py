"""Services Layer: store operations shared by the route modules.

Invariants:
    - Services take an AsyncSession (or the session manager) as an argument
    - Services raise core/errors.py exceptions; they never build HTTP responses
"""
