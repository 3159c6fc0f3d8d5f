"""
SQLite repositories for invoices, customers and users.

Every statement binds its parameters with ``?`` placeholders. Driver
errors, and integers too wide for SQLite to bind, are re-raised as
StorageError.
"""

from __future__ import annotations

import sqlite3
from datetime import date, datetime
from typing import Any
from uuid import UUID

from invoice_actions.domain.entities import Customer, Invoice, User
from invoice_actions.domain.errors import StorageError

from .database import Database

# -----------------------------------------------------------------------------
# Base SQLite Repository
# -----------------------------------------------------------------------------


class SQLiteRepoBase:
    """Base class for SQLite repositories."""

    def __init__(self, db: Database):
        self.db = db

    def _execute(self, operation: str, sql: str, params: tuple[Any, ...] = ()) -> int:
        """Run a single write statement. Returns rows affected."""
        try:
            with self.db.transaction() as conn:
                cursor = conn.execute(sql, params)
                return cursor.rowcount
        except (sqlite3.Error, OverflowError) as e:
            raise StorageError(operation, e) from e

    def _fetch_one(self, operation: str, sql: str, params: tuple[Any, ...] = ()) -> Any:
        try:
            with self.db.transaction() as conn:
                return conn.execute(sql, params).fetchone()
        except (sqlite3.Error, OverflowError) as e:
            raise StorageError(operation, e) from e

    def _fetch_all(self, operation: str, sql: str, params: tuple[Any, ...] = ()) -> list[Any]:
        try:
            with self.db.transaction() as conn:
                return conn.execute(sql, params).fetchall()
        except (sqlite3.Error, OverflowError) as e:
            raise StorageError(operation, e) from e


# -----------------------------------------------------------------------------
# Invoice Repository
# -----------------------------------------------------------------------------


class SQLiteInvoiceRepo(SQLiteRepoBase):
    """SQLite implementation of InvoiceRepoPort."""

    def insert(self, invoice: Invoice) -> Invoice:
        self._execute(
            "insert invoice",
            """
            INSERT INTO invoices (id, customer_id, amount, status, date)
            VALUES (?, ?, ?, ?, ?)
            """,
            (
                str(invoice.id),
                invoice.customer_id,
                invoice.amount,
                invoice.status,
                invoice.date.isoformat(),
            ),
        )
        return invoice

    def update(self, invoice_id: UUID | str, customer_id: str, amount: int, status: str) -> int:
        return self._execute(
            "update invoice",
            """
            UPDATE invoices
            SET customer_id = ?,
                amount      = ?,
                status      = ?
            WHERE id = ?
            """,
            (customer_id, amount, status, str(invoice_id)),
        )

    def delete(self, invoice_id: UUID | str) -> int:
        return self._execute(
            "delete invoice", "DELETE FROM invoices WHERE id = ?", (str(invoice_id),)
        )

    def get_by_id(self, invoice_id: UUID | str) -> Invoice | None:
        row = self._fetch_one(
            "get invoice", "SELECT * FROM invoices WHERE id = ?", (str(invoice_id),)
        )
        return self._map_row(row) if row else None

    def list_all(self) -> list[Invoice]:
        rows = self._fetch_all(
            "list invoices", "SELECT * FROM invoices ORDER BY date DESC, id"
        )
        return [self._map_row(r) for r in rows]

    def _map_row(self, row: dict[str, Any]) -> Invoice:
        return Invoice(
            id=UUID(row["id"]),
            customer_id=row["customer_id"],
            amount=row["amount"],
            status=row["status"],
            date=date.fromisoformat(row["date"]),
        )


# -----------------------------------------------------------------------------
# Customer Repository
# -----------------------------------------------------------------------------


class SQLiteCustomerRepo(SQLiteRepoBase):
    def save(self, customer: Customer) -> Customer:
        self._execute(
            "save customer",
            """
            INSERT INTO customers (id, name, email, image_url)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name=excluded.name,
                email=excluded.email,
                image_url=excluded.image_url
            """,
            (customer.id, customer.name, customer.email, customer.image_url),
        )
        return customer

    def get_by_id(self, customer_id: str) -> Customer | None:
        row = self._fetch_one(
            "get customer", "SELECT * FROM customers WHERE id = ?", (customer_id,)
        )
        return Customer(**row) if row else None

    def list_all(self) -> list[Customer]:
        rows = self._fetch_all("list customers", "SELECT * FROM customers ORDER BY name")
        return [Customer(**r) for r in rows]


# -----------------------------------------------------------------------------
# User Repository
# -----------------------------------------------------------------------------


class SQLiteUserRepo(SQLiteRepoBase):
    def save(self, user: User) -> User:
        self._execute(
            "save user",
            """
            INSERT INTO users (id, name, email, password_hash, status, created_at)
            VALUES (?, ?, ?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name=excluded.name,
                email=excluded.email,
                password_hash=excluded.password_hash,
                status=excluded.status
            """,
            (
                str(user.id),
                user.name,
                user.email.lower(),
                user.password_hash,
                user.status,
                user.created_at.isoformat(),
            ),
        )
        return user

    def get_by_email(self, email: str) -> User | None:
        row = self._fetch_one(
            "get user", "SELECT * FROM users WHERE email = ?", (email.lower(),)
        )
        return self._map_row(row) if row else None

    def get_by_id(self, user_id: UUID | str) -> User | None:
        row = self._fetch_one("get user", "SELECT * FROM users WHERE id = ?", (str(user_id),))
        return self._map_row(row) if row else None

    def _map_row(self, row: dict[str, Any]) -> User:
        return User(
            id=UUID(row["id"]),
            name=row["name"],
            email=row["email"],
            password_hash=row["password_hash"],
            status=row["status"],
            created_at=datetime.fromisoformat(row["created_at"]),
        )
