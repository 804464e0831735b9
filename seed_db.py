import logging
import os
import sys

# Add root to pythonpath
sys.path.append(os.getcwd())

from src.adapters.auth.crypto import PasslibPasswordHasher  # noqa: E402
from src.adapters.sqlite.migrator import SQLiteMigrator  # noqa: E402
from src.adapters.sqlite.repos import SQLiteCustomerRepo, SQLiteUserRepo  # noqa: E402
from src.adapters.sqlite_db import SQLiteGateway  # noqa: E402
from src.api.deps import Settings  # noqa: E402
from src.components.invoices import INSERT_INVOICE  # noqa: E402
from src.domain.entities import Customer, User  # noqa: E402

logging.basicConfig(level=logging.INFO)

DEMO_CUSTOMERS = [
    Customer(
        id="d6e15727-9fe1-4961-8c5b-ea44a9bd81aa",
        name="Evil Rabbit",
        email="evil@rabbit.com",
    ),
    Customer(
        id="3958dc9e-712f-4377-85e9-fec4b6a6442a",
        name="Delba de Oliveira",
        email="delba@oliveira.com",
    ),
    Customer(
        id="3958dc9e-742f-4377-85e9-fec4b6a6442a",
        name="Lee Robinson",
        email="lee@robinson.com",
    ),
]

DEMO_INVOICES = [
    ("d6e15727-9fe1-4961-8c5b-ea44a9bd81aa", 15795, "pending", "2022-12-06"),
    ("3958dc9e-712f-4377-85e9-fec4b6a6442a", 20348, "pending", "2022-11-14"),
    ("3958dc9e-742f-4377-85e9-fec4b6a6442a", 3040, "paid", "2022-10-29"),
]


def seed() -> None:
    settings = Settings()
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    print(f"Seeding to {settings.db_path}")

    SQLiteMigrator(settings.db_path, str(settings.base_dir / "migrations")).run_migrations()

    users = SQLiteUserRepo(settings.db_path)
    email = "user@nextmail.com"
    if users.get_by_email(email) is None:
        users.save(
            User(
                name="User",
                email=email,
                password_hash=PasslibPasswordHasher().hash_password("123456"),
            )
        )
        print(f"Created user: {email} / 123456")
    else:
        print(f"User {email} already exists")

    customers = SQLiteCustomerRepo(settings.db_path)
    gateway = SQLiteGateway(settings.db_path)
    for customer in DEMO_CUSTOMERS:
        if customers.get_by_id(customer.id) is None:
            customers.save(customer)
            print(f"Created customer: {customer.name}")

    if not gateway.fetch_all("SELECT id FROM invoices LIMIT 1"):
        for row in DEMO_INVOICES:
            gateway.execute(INSERT_INVOICE, row)
        print(f"Created {len(DEMO_INVOICES)} invoices")


if __name__ == "__main__":
    seed()
