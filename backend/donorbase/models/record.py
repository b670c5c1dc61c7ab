"""Stored Record ORM - one row per (namespace, key) pair of the key-value store.

Invariants:
    - (namespace, key) is the composite primary key: keys are unique per namespace
    - value holds the record's JSON dict exactly as produced by to_dict()
    - Registries never share a namespace
"""

from sqlalchemy import String, JSON
from sqlalchemy.orm import Mapped, mapped_column

from donorbase.core.domain_types import MAX_KEY_LENGTH
from donorbase.db.base import Base


class StoredRecord(Base):
    """A single key-value entry."""
    __tablename__ = "records"

    namespace: Mapped[str] = mapped_column(String(32), primary_key=True)
    key: Mapped[str] = mapped_column(String(MAX_KEY_LENGTH), primary_key=True)
    value: Mapped[dict] = mapped_column(JSON, nullable=False)
