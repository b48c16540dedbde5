"""
Pytest configuration and fixtures for skill stats tests.

Storage tests run against an in-memory SQLite database with foreign keys
enabled; the host ``accounts`` table is created by the fixtures to stand in
for the game engine's account entity.
"""

import pytest
import sqlalchemy as sa
from sqlalchemy.pool import StaticPool

from skillstats.persistence.store import SkillRecordStore
from skillstats.persistence.tables import build_skills_table


def _enable_sqlite_fks(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
def engine():
    """In-memory SQLite engine shared across connections."""
    eng = sa.create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    sa.event.listen(eng, "connect", _enable_sqlite_fks)
    yield eng
    eng.dispose()


@pytest.fixture
def schema():
    """Fresh metadata holding the accounts and skills tables."""
    metadata = sa.MetaData()
    skills = build_skills_table(metadata)
    return metadata, skills


@pytest.fixture
def accounts_table(engine, schema):
    """Create the host accounts table (the skills table is left to the store)."""
    metadata, _skills = schema
    accounts = metadata.tables["accounts"]
    accounts.create(engine)
    return accounts


@pytest.fixture
def make_account(engine, accounts_table):
    """Insert an account row and return its id."""

    def _make(account_id: int) -> int:
        with engine.begin() as conn:
            conn.execute(sa.insert(accounts_table).values(acctid=account_id))
        return account_id

    return _make


@pytest.fixture
def store(engine, schema, accounts_table):
    """Store whose table has not been provisioned yet."""
    _metadata, skills = schema
    return SkillRecordStore(engine, skills)


@pytest.fixture
def provisioned_store(store):
    """Store with the skills table created."""
    store.ensure_schema()
    return store
