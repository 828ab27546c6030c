"""The initial migration creates the same constraint names the models declare."""

import importlib.util
import io
import re
import unittest
from pathlib import Path

from alembic.operations import Operations
from alembic.runtime.migration import MigrationContext
from sqlalchemy.dialects import postgresql
from sqlalchemy.schema import CreateTable

from app.models import Base

MIGRATION_PATH = (
    Path(__file__).resolve().parent.parent
    / "alembic"
    / "versions"
    / "20251019000000_initial_users_stores_ratings.py"
)
CONSTRAINT_NAME = re.compile(r"CONSTRAINT (\w+) ")


def _load_migration():
    spec = importlib.util.spec_from_file_location("initial_migration", MIGRATION_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _render_upgrade_sql() -> str:
    """Run upgrade() in offline mode for PostgreSQL, with the models' naming convention."""
    buf = io.StringIO()
    ctx = MigrationContext.configure(
        dialect_name="postgresql",
        opts={"as_sql": True, "output_buffer": buf, "target_metadata": Base.metadata},
    )
    with Operations.context(ctx):
        _load_migration().upgrade()
    return buf.getvalue()


def _models_sql() -> str:
    dialect = postgresql.dialect()
    return "\n".join(
        str(CreateTable(table).compile(dialect=dialect)) for table in Base.metadata.sorted_tables
    )


class TestInitialMigration(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.migration_sql = _render_upgrade_sql()
        cls.models_sql = _models_sql()

    def test_check_constraint_names(self) -> None:
        names = set(CONSTRAINT_NAME.findall(self.migration_sql))
        self.assertIn("ck_users_role", names)
        self.assertIn("ck_ratings_rating_range", names)
        self.assertNotIn("ck_users_ck_users_role", self.migration_sql)
        self.assertNotIn("ck_ratings_ck_ratings_rating_range", self.migration_sql)

    def test_constraint_names_match_models(self) -> None:
        self.assertEqual(
            set(CONSTRAINT_NAME.findall(self.migration_sql)),
            set(CONSTRAINT_NAME.findall(self.models_sql)),
        )

    def test_creates_every_model_table(self) -> None:
        for table in Base.metadata.tables:
            self.assertIn(f"CREATE TABLE {table} ", self.migration_sql)


if __name__ == "__main__":
    unittest.main()
