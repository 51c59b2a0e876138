# clean_api/adapters/outbound/persistence/models/base_model.py

"""
Base class for SQLAlchemy models.
"""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base for every model."""
