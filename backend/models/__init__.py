"""SQLAlchemy ORM models for Permalinker."""

from backend.models.base import Base
from backend.models.entry import Category, Entry
from backend.models.option import Option

__all__ = [
    "Base",
    "Category",
    "Entry",
    "Option",
]
