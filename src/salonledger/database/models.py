"""SQLAlchemy models for salonledger database."""

import uuid
from datetime import datetime, UTC
from sqlalchemy import (
    JSON,
    Column,
    DateTime,
    Float,
    String,
    create_engine,
)
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


def new_document_id() -> str:
    """Generate an opaque document ID."""
    return uuid.uuid4().hex


class Employee(Base):
    """Employee model."""

    __tablename__ = "employees"

    id = Column(String(32), primary_key=True, default=new_document_id)
    name = Column(String, nullable=False)
    role = Column(String, nullable=False)
    photo = Column(String, nullable=True)
    avatar_seed = Column(String, nullable=False)
    # Number or text, kept exactly as entered
    commission = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Service(Base):
    """Service catalog model."""

    __tablename__ = "services"

    id = Column(String(32), primary_key=True, default=new_document_id)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)


class Transaction(Base):
    """Transaction model.

    employee_id has no foreign key: deleting an employee leaves their
    transactions in place.
    """

    __tablename__ = "transactions"

    id = Column(String(32), primary_key=True, default=new_document_id)
    employee_id = Column(String(32), nullable=False, index=True)
    service_name = Column(String, nullable=False)
    price = Column(Float, nullable=False)
    date = Column(DateTime, nullable=False, index=True)
    payment_method = Column(String, nullable=True)


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"

    id = Column(String(32), primary_key=True, default=new_document_id)
    category = Column(String, nullable=False)
    amount = Column(Float, nullable=False)
    description = Column(String, nullable=False, default="")
    date = Column(DateTime, nullable=False, index=True)


class Booking(Base):
    """Booking model."""

    __tablename__ = "bookings"

    id = Column(String(32), primary_key=True, default=new_document_id)
    client_name = Column(String, nullable=False)
    client_phone = Column(String, nullable=False, default="")
    service = Column(String, nullable=False)
    professional_id = Column(String(32), nullable=False)
    date = Column(DateTime, nullable=False)
    status = Column(String, nullable=False, default="confirmed")
    payment_method = Column(String, nullable=True)


class Setting(Base):
    """One field of the settings/config document."""

    __tablename__ = "settings"

    key = Column(String, primary_key=True)
    value = Column(String, nullable=True)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
