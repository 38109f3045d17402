"""Database Infrastructure: declarative base and column types shared by ORM models.

Invariants:
    - Tables are owned by the managed database; metadata here mirrors them
      (used for queries, and for create_all in tests only)
"""
