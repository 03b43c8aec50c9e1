"""SQLAlchemy models for the weighing log."""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Date,
    Numeric,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

Base = declarative_base()


class Entry(Base):
    """Weighing entry model."""

    __tablename__ = "entries"

    id = Column(String, primary_key=True)
    # Display order; the front of the log has the lowest position.
    position = Column(Integer, nullable=False, index=True)
    plate_number = Column(String, nullable=False)
    gross_weight_kg = Column(Integer, nullable=False, default=0)
    empty_weight_kg = Column(Integer, nullable=False, default=0)
    net_weight_kg = Column(Integer, nullable=False, default=0)
    date = Column(Date, nullable=False)
    charge = Column(Numeric(12, 2), nullable=False, default=0)
    check_number = Column(String, nullable=False, default="")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    if database_url in ("sqlite://", "sqlite:///:memory:"):
        # Every connection to an in-memory database sees a fresh, empty one,
        # so all sessions must share a single connection.
        engine = create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
