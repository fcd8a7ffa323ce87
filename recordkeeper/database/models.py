"""
Database Models - SQLAlchemy ORM models.

The store holds a single flat collection of records. ``id`` is assigned
by the caller (seed script or sample data) and never changes.
"""
from typing import Any, Dict

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Record(Base):
    """A stored ``{id, name, value}`` record."""
    __tablename__ = "records"

    id = Column(Integer, primary_key=True, autoincrement=False)
    name = Column(String(255), nullable=False)
    value = Column(String(1024), nullable=False)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "value": self.value,
        }

    def __repr__(self) -> str:
        return f"<Record id={self.id} name={self.name!r}>"
