"""SQLAlchemy models for the ledgepro key-value store."""

from datetime import datetime, UTC

from sqlalchemy import (
    Column,
    String,
    Text,
    DateTime,
    PrimaryKeyConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class StoreEntry(Base):
    """One JSON-encoded value stored under a namespaced key."""

    __tablename__ = "store_entries"

    namespace = Column(String, nullable=False)
    key = Column(String, nullable=False)
    value = Column(Text, nullable=False)
    updated_at = Column(
        DateTime,
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
        nullable=False,
    )

    __table_args__ = (PrimaryKeyConstraint("namespace", "key", name="pk_store_entries"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
