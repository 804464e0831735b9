from __future__ import annotations

from src.adapters.sqlite_db import SQLiteGateway
from src.domain.entities import Customer, Invoice, User


class SQLiteUserRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path
        self._gateway = SQLiteGateway(db_path)

    def get_by_email(self, email: str) -> User | None:
        row = self._gateway.fetch_one("SELECT * FROM users WHERE email = ?", (email,))
        return User.model_validate(row) if row else None

    def save(self, user: User) -> User:
        self._gateway.execute(
            """
            INSERT INTO users (id, name, email, password_hash)
            VALUES (?, ?, ?, ?)
            ON CONFLICT(id) DO UPDATE SET
                name=excluded.name,
                email=excluded.email,
                password_hash=excluded.password_hash
            """,
            (user.id, user.name, user.email, user.password_hash),
        )
        return user


class SQLiteCustomerRepo:
    def __init__(self, db_path: str):
        self.db_path = db_path
        self._gateway = SQLiteGateway(db_path)

    def get_by_id(self, customer_id: str) -> Customer | None:
        row = self._gateway.fetch_one("SELECT * FROM customers WHERE id = ?", (customer_id,))
        return Customer.model_validate(row) if row else None

    def save(self, customer: Customer) -> Customer:
        self._gateway.execute(
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


class SQLiteInvoiceRepo:
    """Read side of the invoices table, used by the listing page."""

    def __init__(self, db_path: str):
        self.db_path = db_path
        self._gateway = SQLiteGateway(db_path)

    def list_all(self) -> list[Invoice]:
        rows = self._gateway.fetch_all("SELECT * FROM invoices ORDER BY date DESC, id")
        return [Invoice.model_validate(row) for row in rows]
