"""Schema creation tests."""

import importlib.util
from pathlib import Path

import pytest
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import create_engine, inspect

from accounts.database import engine, init_db
from conftest import IS_SQLITE

MIGRATION = (
    Path(__file__).resolve().parent.parent
    / "alembic"
    / "versions"
    / "0001_create_users_and_refresh_tokens.py"
)


def load_migration():
    spec = importlib.util.spec_from_file_location("initial_migration", MIGRATION)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.mark.skipif(not IS_SQLITE, reason="init_db targets the application database")
def test_init_db_creates_tables():
    """Test init_db creates both tables and is safe to rerun."""
    init_db()
    init_db()
    tables = inspect(engine).get_table_names()
    assert "users" in tables
    assert "refresh_tokens" in tables


def test_alembic_revision_matches_models():
    """Test the initial revision builds the same schema as the models."""
    migration = load_migration()
    memory_engine = create_engine("sqlite://")

    with memory_engine.begin() as conn:
        with Operations.context(MigrationContext.configure(conn)):
            migration.upgrade()

        inspector = inspect(conn)
        assert set(inspector.get_table_names()) == {"users", "refresh_tokens"}

        user_columns = {c["name"] for c in inspector.get_columns("users")}
        assert user_columns == {"id", "name", "email", "password", "is_superuser", "created_at"}

        foreign_keys = inspector.get_foreign_keys("refresh_tokens")
        assert foreign_keys[0]["referred_table"] == "users"

        unique_indexes = {
            i["name"] for i in inspector.get_indexes("refresh_tokens") if i["unique"]
        }
        assert "ix_refresh_tokens_token" in unique_indexes

        with Operations.context(MigrationContext.configure(conn)):
            migration.downgrade()
        assert inspect(conn).get_table_names() == []


@pytest.mark.skipif(not IS_SQLITE, reason="the script targets the application database")
def test_migrate_script():
    """Test the migrate script creates the tables."""
    script = Path(__file__).resolve().parent.parent / "scripts" / "migrate.py"
    spec = importlib.util.spec_from_file_location("migrate_script", script)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    module.run_migrations()
    assert {"users", "refresh_tokens"} <= set(inspect(engine).get_table_names())
