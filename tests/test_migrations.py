"""The alembic migration builds the same schema as invoicebook.db.schema."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from sqlalchemy import inspect

from invoicebook.db.engine import build_engine
from invoicebook.db.schema import metadata

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def migration_engine(tmp_path):
    engine = build_engine(f"sqlite:///{tmp_path / 'migrated.db'}")
    yield engine
    engine.dispose()


def _run(engine, action, revision):
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    cfg.attributes["configure_logger"] = False
    with engine.begin() as conn:
        cfg.attributes["connection"] = conn
        action(cfg, revision)


def test_upgrade_matches_metadata_then_downgrade(migration_engine):
    _run(migration_engine, command.upgrade, "head")

    insp = inspect(migration_engine)
    assert set(insp.get_table_names()) == set(metadata.tables) | {"alembic_version"}

    for name, table in metadata.tables.items():
        migrated = {c["name"]: c for c in insp.get_columns(name)}
        assert set(migrated) == {c.name for c in table.columns}, name
        for column in table.columns:
            if not column.primary_key:
                assert migrated[column.name]["nullable"] == column.nullable, (name, column.name)
            if column.name in ("created_at", "updated_at"):
                assert migrated[column.name]["default"] is not None, (name, column.name)

        assert {ix["name"] for ix in insp.get_indexes(name)} == {ix.name for ix in table.indexes}, name

        migrated_fks = {
            (tuple(fk["constrained_columns"]), fk["referred_table"])
            for fk in insp.get_foreign_keys(name)
        }
        expected_fks = {
            (tuple(fk.column_keys), fk.elements[0].column.table.name)
            for fk in table.foreign_key_constraints
        }
        assert migrated_fks == expected_fks, name

    _run(migration_engine, command.downgrade, "base")

    assert set(inspect(migration_engine).get_table_names()) == {"alembic_version"}
