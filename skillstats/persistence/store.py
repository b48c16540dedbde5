"""Skill record store backed by SQLAlchemy Core.

Reads are fail-soft: an unprovisioned table, a missing row or a storage error
all degrade to a default record, so the stats panel always has something to
show. Every record leaving the store has been normalized and clamped.
"""

import logging
from datetime import datetime
from typing import Any, Mapping, Optional

import sqlalchemy as sa
from sqlalchemy import select, update
from sqlalchemy.dialects.mysql import insert as mysql_insert
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from skillstats.exceptions import SkillStatsError, UnknownSkillError
from skillstats.persistence.models import (
    PlayerSkillRecord,
    SkillProgress,
    coerce_int,
    default_record,
)
from skillstats.persistence.tables import build_skills_table
from skillstats.skills.registry import get_skill, list_skills

logger = logging.getLogger(__name__)


def _parse_timestamp(value: Any) -> datetime | None:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        try:
            return datetime.fromisoformat(value)
        except ValueError:
            return None
    return None


def normalize_row(row: Optional[Mapping[str, Any]], account_id: int) -> PlayerSkillRecord:
    """Turn a stored row into a clamped record.

    Missing or unparseable columns keep their defaults; columns that do not
    belong to a registered skill are ignored.
    """
    record = default_record(account_id)
    if row is None:
        return record

    for skill in list_skills():
        current = record.skills[skill.key]
        level = current.level
        experience = current.experience
        if skill.level_column in row:
            level = coerce_int(row[skill.level_column], level)
        if skill.experience_column in row:
            experience = coerce_int(row[skill.experience_column], experience)
        record.skills[skill.key] = SkillProgress(level=level, experience=experience)

    record.updated_at = _parse_timestamp(row.get("updated_at"))
    return record


class SkillRecordStore:
    """Owns persistence of per-account skill records.

    Engine lifecycle is managed externally (created from config by the CLI or
    the host, passed to the constructor). Connections are taken per operation.
    """

    def __init__(self, engine: Engine, table: sa.Table | None = None):
        self._engine = engine
        if table is None:
            table = build_skills_table(sa.MetaData())
        self._table = table

    @property
    def table(self) -> sa.Table:
        return self._table

    # === Schema ===

    def ensure_schema(self) -> None:
        """Create the skills table if it does not exist yet."""
        with self._engine.begin() as conn:
            self._table.create(conn, checkfirst=True)
        logger.info(f"Skills table '{self._table.name}' is provisioned")

    def table_exists(self) -> bool:
        with self._engine.connect() as conn:
            return sa.inspect(conn).has_table(self._table.name)

    # === Reads ===

    def load(self, account_id: int) -> PlayerSkillRecord:
        """Load the record for ``account_id``, creating the row on first access.

        Never raises for storage problems; falls back to a default record.
        """
        record = default_record(account_id)
        if account_id <= 0:
            return record

        try:
            if not self.table_exists():
                logger.debug(f"Skills table '{self._table.name}' missing, using defaults")
                return record
        except SQLAlchemyError as e:
            logger.warning(f"Could not inspect skills table: {e}")
            return record

        row = self._fetch_row(account_id)
        if row is None:
            try:
                self.create_if_missing(account_id)
            except SQLAlchemyError as e:
                logger.warning(f"Could not create skills row for account {account_id}: {e}")
            row = self._fetch_row(account_id)

        if row is None:
            return record
        return normalize_row(row, account_id)

    def _fetch_row(self, account_id: int) -> Mapping[str, Any] | None:
        try:
            with self._engine.connect() as conn:
                result = conn.execute(
                    select(self._table).where(self._table.c.userid == account_id)
                )
                row = result.mappings().first()
        except SQLAlchemyError as e:
            logger.warning(f"Could not read skills row for account {account_id}: {e}")
            return None
        return dict(row) if row else None

    # === Writes ===

    def create_if_missing(self, account_id: int) -> bool:
        """Insert the default row for ``account_id`` unless it already exists.

        Safe under concurrent duplicate attempts. Returns True if a row was
        inserted. Does nothing for invalid ids or an unprovisioned table.
        """
        if account_id <= 0 or not self.table_exists():
            return False

        dialect = self._engine.dialect.name
        if dialect == "postgresql":
            stmt = pg_insert(self._table).values(userid=account_id).on_conflict_do_nothing(
                index_elements=[self._table.c.userid]
            )
        elif dialect == "sqlite":
            stmt = sqlite_insert(self._table).values(userid=account_id).on_conflict_do_nothing(
                index_elements=[self._table.c.userid]
            )
        elif dialect in ("mysql", "mariadb"):
            return self._create_mysql(account_id)
        else:
            try:
                with self._engine.begin() as conn:
                    conn.execute(sa.insert(self._table).values(userid=account_id))
            except IntegrityError:
                return False
            logger.debug(f"Created skills row for account {account_id}")
            return True

        with self._engine.begin() as conn:
            result = conn.execute(stmt)
            inserted = result.rowcount == 1
        if inserted:
            logger.debug(f"Created skills row for account {account_id}")
        return inserted

    def _create_mysql(self, account_id: int) -> bool:
        # MySQL reports a matched no-op duplicate update as one affected row
        # (CLIENT_FOUND_ROWS), so existence is checked in the same transaction.
        exists = select(self._table.c.userid).where(self._table.c.userid == account_id)
        stmt = (
            mysql_insert(self._table)
            .values(userid=account_id)
            .on_duplicate_key_update(updated_at=self._table.c.updated_at)
        )
        with self._engine.begin() as conn:
            if conn.execute(exists).first() is not None:
                return False
            conn.execute(stmt)
        logger.debug(f"Created skills row for account {account_id}")
        return True

    def save_progress(
        self, account_id: int, key: str, level: int, experience: int
    ) -> SkillProgress:
        """Store clamped progress for one skill and return what was stored."""
        skill = get_skill(key)
        if skill is None:
            raise UnknownSkillError(f"Unknown skill '{key}'", skill_key=key)
        if account_id <= 0:
            raise SkillStatsError(f"Invalid account id {account_id}")
        if not self.table_exists():
            raise SkillStatsError(f"Skills table '{self._table.name}' is not provisioned")

        progress = SkillProgress.of(level, experience)
        self.create_if_missing(account_id)
        with self._engine.begin() as conn:
            conn.execute(
                update(self._table)
                .where(self._table.c.userid == account_id)
                .values(
                    {
                        skill.level_column: progress.level,
                        skill.experience_column: progress.experience,
                    }
                )
            )
        return progress
