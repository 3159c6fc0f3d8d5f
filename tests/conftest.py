from collections.abc import Iterator

import pytest

from invoice_actions.adapters.sqlite.database import Database
from invoice_actions.adapters.sqlite.migrator import SQLiteMigrator
from invoice_actions.adapters.sqlite.repos import SQLiteCustomerRepo
from invoice_actions.domain.entities import Customer


@pytest.fixture
def test_db_path(tmp_path) -> str:
    return str(tmp_path / "invoices.db")


@pytest.fixture
def db(test_db_path) -> Iterator[Database]:
    """Migrated, open SQLite database in a temp dir."""
    SQLiteMigrator(test_db_path).run_migrations()
    database = Database(test_db_path).open()
    yield database
    database.close()


@pytest.fixture
def customer(db: Database) -> Customer:
    """A customer row so invoice foreign keys resolve."""
    return SQLiteCustomerRepo(db).save(
        Customer(id="c1", name="Evil Rabbit", email="evil@rabbit.com")
    )
