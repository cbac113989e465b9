"""SQLAlchemy models for ledgerbook database."""

from datetime import datetime, UTC
from sqlalchemy import (
    CheckConstraint,
    Column,
    Integer,
    String,
    DateTime,
    Date,
    Numeric,
    Index,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


class Service(Base):
    """Catalog service model."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    price = Column(Numeric(15, 2), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (CheckConstraint("price >= 0", name="ck_service_price_non_negative"),)


class Client(Base):
    """Client contact model."""

    __tablename__ = "clients"

    id = Column(Integer, primary_key=True)
    name = Column(String, nullable=False, index=True)
    phone = Column(String, nullable=True)
    email = Column(String, nullable=True)
    notes = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Transaction(Base):
    """Transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    type = Column(String, nullable=False)
    payment_status = Column(String, nullable=False, default="paid")
    # Free-text client name, not a foreign key
    client = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        CheckConstraint("amount >= 0", name="ck_transaction_amount_non_negative"),
        CheckConstraint("type IN ('income', 'expense')", name="ck_transaction_type"),
        CheckConstraint("payment_status IN ('paid', 'unpaid')", name="ck_transaction_payment_status"),
        Index("idx_transactions_date", "date"),
        Index("idx_transactions_type", "type"),
        Index("idx_transactions_payment_status", "payment_status"),
    )


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
