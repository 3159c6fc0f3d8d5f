import argparse
import logging
import sys
from pathlib import Path

from invoice_actions.adapters.auth.crypto import get_password_hash
from invoice_actions.adapters.sqlite.database import Database
from invoice_actions.adapters.sqlite.migrator import SQLiteMigrator
from invoice_actions.adapters.sqlite.repos import SQLiteCustomerRepo, SQLiteUserRepo
from invoice_actions.api.deps import get_settings
from invoice_actions.domain.entities import Customer, User

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def _migrate(db_path: str) -> list[str]:
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return SQLiteMigrator(db_path).run_migrations()


def _migrated_db(db_path: str) -> Database:
    _migrate(db_path)
    return Database(db_path)


def handle_migrate(args: argparse.Namespace) -> None:
    db_path = get_settings().db_path
    applied = _migrate(db_path)
    print(f"Applied {len(applied)} migration(s) to {db_path}.")


def handle_create_user(args: argparse.Namespace) -> None:
    with _migrated_db(get_settings().db_path) as db:
        repo = SQLiteUserRepo(db)
        if repo.get_by_email(args.email):
            logger.error(f"User {args.email} already exists.")
            sys.exit(1)
        user = User(
            name=args.name or args.email.split("@")[0],
            email=args.email,
            password_hash=get_password_hash(args.password),
        )
        repo.save(user)
    print(f"User created: {user.email} ({user.id})")


def handle_add_customer(args: argparse.Namespace) -> None:
    with _migrated_db(get_settings().db_path) as db:
        customer = SQLiteCustomerRepo(db).save(
            Customer(name=args.name, email=args.email, image_url=args.image_url)
        )
    print(f"Customer created: {customer.name} ({customer.id})")


def handle_serve(args: argparse.Namespace) -> None:
    import uvicorn

    uvicorn.run("invoice_actions.api.main:app", host=args.host, port=args.port)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Invoice Actions CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # migrate
    subparsers.add_parser("migrate", help="Apply pending database migrations")

    # create-user
    user_parser = subparsers.add_parser("create-user", help="Create a sign-in user")
    user_parser.add_argument("email")
    user_parser.add_argument("password")
    user_parser.add_argument("--name", help="Display name (defaults to email local part)")

    # add-customer
    customer_parser = subparsers.add_parser("add-customer", help="Add a customer")
    customer_parser.add_argument("name")
    customer_parser.add_argument("email")
    customer_parser.add_argument("--image-url", dest="image_url")

    # serve
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)

    args = parser.parse_args(argv)

    handlers = {
        "migrate": handle_migrate,
        "create-user": handle_create_user,
        "add-customer": handle_add_customer,
        "serve": handle_serve,
    }
    handlers[args.command](args)


if __name__ == "__main__":
    main()
