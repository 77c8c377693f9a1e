"""
Relational implementation of DataStore using SQLModel tables.

The customer directory and the user lookup are pushed down to the
database as single queries; the listings return rows in insertion order.
Tables are created on construction and can be seeded from any other
DataStore (typically the JSON fixtures).

Configuration:
    DASHBOARD_DATABASE_URL: SQLAlchemy URL (default in-memory SQLite).
"""

import os
from threading import Lock
from typing import Any, Dict, List

from sqlalchemy import case
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import Field, Session, SQLModel, col, create_engine, func, or_, select

from invoice_dashboard.lib import logs
from invoice_dashboard.models.records import Customer, Invoice, User
from invoice_dashboard.models.views import CustomerTotals
from invoice_dashboard.services.data_store import DataStore

LOG = logs.logger(__file__)

_DEFAULT_DATABASE_URL = "sqlite://"
_MEMORY_URLS = {"sqlite://", "sqlite:///:memory:"}


class CustomerRow(SQLModel, table=True):
    __tablename__ = "customers"

    row_id: int | None = Field(default=None, primary_key=True)
    id: str = Field(unique=True, index=True)
    name: str = Field(index=True)
    email: str = Field(index=True)
    image_url: str = ""


class InvoiceRow(SQLModel, table=True):
    __tablename__ = "invoices"

    row_id: int | None = Field(default=None, primary_key=True)
    id: str | None = Field(default=None, index=True)
    customer_id: str = Field(index=True, foreign_key="customers.id")
    amount: int
    date: str
    status: str


class UserRow(SQLModel, table=True):
    __tablename__ = "users"

    row_id: int | None = Field(default=None, primary_key=True)
    id: str = ""
    name: str = ""
    email: str = Field(index=True)
    password: str


class RevenueRow(SQLModel, table=True):
    __tablename__ = "revenue"

    row_id: int | None = Field(default=None, primary_key=True)
    month: str
    revenue: int


def create_database_engine(url: str | None = None) -> Engine:
    """
    Create an engine for ``url`` (or DASHBOARD_DATABASE_URL).

    In-memory SQLite shares a single connection so every thread sees the
    same database.
    """
    resolved_url = url or os.getenv("DASHBOARD_DATABASE_URL", _DEFAULT_DATABASE_URL)
    if resolved_url.startswith("sqlite"):
        kwargs: Dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if resolved_url in _MEMORY_URLS:
            kwargs["poolclass"] = StaticPool
        return create_engine(resolved_url, **kwargs)
    return create_engine(resolved_url, pool_pre_ping=True)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SqlDataStore(DataStore):
    """
    DataStore over the ``customers``, ``invoices``, ``users`` and
    ``revenue`` tables.

    Attributes:
        engine: SQLAlchemy engine the store queries.
    """

    def __init__(self, engine: Engine | None = None) -> None:
        self.engine = engine or create_database_engine()
        # StaticPool hands the same connection to every thread
        self._lock = Lock()
        SQLModel.metadata.create_all(self.engine)
        LOG.info("SqlDataStore - url:%s", self.engine.url.render_as_string(hide_password=True))

    def seed(self, source: DataStore) -> bool:
        """
        Copy every record from ``source`` when all four tables are empty.

        Returns:
            True if rows were inserted, False if data was already present.
        """
        with self._lock, Session(self.engine) as session:
            for table in (CustomerRow, InvoiceRow, UserRow, RevenueRow):
                if session.exec(select(table)).first() is not None:
                    return False

            session.add_all(
                CustomerRow(**customer.to_record()) for customer in source.customers()
            )
            session.add_all(
                InvoiceRow(
                    id=invoice.id,
                    customer_id=invoice.customer_id,
                    amount=invoice.amount,
                    date=invoice.date,
                    status=invoice.status,
                )
                for invoice in source.invoices()
            )
            session.add_all(UserRow(**user.to_record()) for user in source.users())
            session.add_all(
                RevenueRow(month=str(raw["month"]), revenue=int(raw["revenue"]))
                for raw in source.revenue()
            )
            session.commit()
        LOG.info("seed - seeded database from %s", type(source).__name__)
        return True

    def revenue(self) -> List[Dict[str, Any]]:
        with self._lock, Session(self.engine) as session:
            rows = session.exec(select(RevenueRow).order_by(RevenueRow.row_id)).all()
            return [{"month": row.month, "revenue": row.revenue} for row in rows]

    def invoices(self) -> List[Invoice]:
        with self._lock, Session(self.engine) as session:
            rows = session.exec(select(InvoiceRow).order_by(InvoiceRow.row_id)).all()
            return [
                Invoice(
                    id=row.id,
                    customer_id=row.customer_id,
                    amount=row.amount,
                    date=row.date,
                    status=row.status,
                )
                for row in rows
            ]

    def customers(self) -> List[Customer]:
        with self._lock, Session(self.engine) as session:
            rows = session.exec(select(CustomerRow).order_by(CustomerRow.row_id)).all()
            return [
                Customer(id=row.id, name=row.name, email=row.email, image_url=row.image_url)
                for row in rows
            ]

    def users(self) -> List[User]:
        with self._lock, Session(self.engine) as session:
            rows = session.exec(select(UserRow).order_by(UserRow.row_id)).all()
            return [_to_user(row) for row in rows]

    def find_user(self, email: str) -> User | None:
        with self._lock, Session(self.engine) as session:
            row = session.exec(
                select(UserRow).where(UserRow.email == email).order_by(UserRow.row_id)
            ).first()
            return _to_user(row) if row is not None else None

    def filtered_customers(self, query: str | None) -> List[CustomerTotals]:
        # SQLite lower() and ILIKE fold ASCII letters only
        pattern = f"%{_escape_like(query or '')}%"
        total_pending = func.sum(
            case((InvoiceRow.status == "pending", InvoiceRow.amount), else_=0)
        )
        total_paid = func.sum(
            case((InvoiceRow.status == "paid", InvoiceRow.amount), else_=0)
        )
        statement = (
            select(
                CustomerRow.id,
                CustomerRow.name,
                CustomerRow.email,
                CustomerRow.image_url,
                func.count(InvoiceRow.row_id).label("total_invoices"),
                total_pending.label("total_pending"),
                total_paid.label("total_paid"),
            )
            .select_from(CustomerRow)
            .outerjoin(InvoiceRow, CustomerRow.id == InvoiceRow.customer_id)
            .where(
                or_(
                    col(CustomerRow.name).ilike(pattern, escape="\\"),
                    col(CustomerRow.email).ilike(pattern, escape="\\"),
                )
            )
            .group_by(
                CustomerRow.id,
                CustomerRow.name,
                CustomerRow.email,
                CustomerRow.image_url,
            )
            .order_by(CustomerRow.name, CustomerRow.id)
        )
        with self._lock, Session(self.engine) as session:
            rows = session.exec(statement).all()
            return [
                CustomerTotals(
                    id=row.id,
                    name=row.name,
                    email=row.email,
                    image_url=row.image_url,
                    total_invoices=int(row.total_invoices or 0),
                    total_pending=int(row.total_pending or 0),
                    total_paid=int(row.total_paid or 0),
                )
                for row in rows
            ]


def _to_user(row: UserRow) -> User:
    return User(email=row.email, password=row.password, id=row.id, name=row.name)
