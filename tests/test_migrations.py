import sqlite3
from contextlib import closing
from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config

ROOT = Path(__file__).resolve().parents[1]


def alembic_config():
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "alembic"))
    return cfg


def table_names(db_path):
    with closing(sqlite3.connect(db_path)) as conn:
        return {row[0] for row in conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'")}


def test_upgrade_and_downgrade(tmp_path, monkeypatch):
    db_path = tmp_path / "migrated.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{db_path}")
    cfg = alembic_config()

    command.upgrade(cfg, "head")
    tables = table_names(db_path)
    assert "products" in tables
    assert "alembic_version_products" in tables

    with closing(sqlite3.connect(db_path)) as conn:
        conn.execute("INSERT INTO products (name, price) VALUES ('ok', 1)")
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute("INSERT INTO products (name, price) VALUES ('bad', -1)")
        conn.rollback()

    command.downgrade(cfg, "base")
    assert "products" not in table_names(db_path)
