import argparse
import logging
import sys
from pathlib import Path

from src.adapters.auth.crypto import PasslibPasswordHasher
from src.adapters.sqlite.migrator import SQLiteMigrator
from src.adapters.sqlite.repos import SQLiteCustomerRepo, SQLiteUserRepo
from src.api.deps import Settings
from src.domain.entities import Customer, User
from src.rules.loader import load_rules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def handle_migrate(settings: Settings) -> None:
    if not settings.rules_path.exists():
        logger.error(f"Rules file {settings.rules_path} not found.")
        sys.exit(1)

    rules = load_rules(settings.rules_path)
    settings.data_dir.mkdir(parents=True, exist_ok=True)
    migrator = SQLiteMigrator(settings.db_path, str(settings.base_dir / rules.ops.migrations_dir))
    applied = migrator.run_migrations()
    print(f"Applied {len(applied)} migration(s) to {settings.db_path}.")


def handle_create_user(settings: Settings, args: argparse.Namespace) -> None:
    repo = SQLiteUserRepo(settings.db_path)
    if repo.get_by_email(args.email):
        logger.error(f"User {args.email} already exists.")
        sys.exit(1)

    user = User(
        name=args.name or args.email.split("@")[0],
        email=args.email,
        password_hash=PasslibPasswordHasher().hash_password(args.password),
    )
    repo.save(user)
    print(f"Created user {user.email} ({user.id}).")


def handle_create_customer(settings: Settings, args: argparse.Namespace) -> None:
    customer = SQLiteCustomerRepo(settings.db_path).save(
        Customer(name=args.name, email=args.email, image_url=args.image_url)
    )
    print(f"Created customer {customer.name} ({customer.id}).")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Invoice Dashboard CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("migrate", help="Apply pending database migrations")

    user_parser = subparsers.add_parser("create-user", help="Create a sign-in user")
    user_parser.add_argument("email")
    user_parser.add_argument("--password", required=True)
    user_parser.add_argument("--name")

    customer_parser = subparsers.add_parser("create-customer", help="Create a customer")
    customer_parser.add_argument("name")
    customer_parser.add_argument("--email", required=True)
    customer_parser.add_argument("--image-url", default="")

    args = parser.parse_args(argv)
    settings = Settings()

    if args.command == "migrate":
        handle_migrate(settings)
    elif args.command == "create-user":
        handle_create_user(settings, args)
    elif args.command == "create-customer":
        handle_create_customer(settings, args)


if __name__ == "__main__":
    main()
