"""SQLAlchemy Declarative Base: shared base class and portable column types.

Invariants:
    - All models inherit from Base
    - TextList is a Postgres text[] in production and JSON on SQLite (tests)
"""

from sqlalchemy import JSON, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import DeclarativeBase

TextList = ARRAY(Text).with_variant(JSON(), "sqlite")


class Base(DeclarativeBase):
    """Base class for all content ORM models."""
    pass
