"""SQLAlchemy Core table definitions.

The ``skills`` table is derived from the skill registry: two columns per
registered skill, in registry order. The ``accounts`` table belongs to the
host engine; it is declared here only so the foreign key can resolve and is
never created by this package.
"""

import sqlalchemy as sa

from skillstats.skills.registry import SkillDefinition, list_skills

ACCOUNTS_TABLE = "accounts"
SKILLS_TABLE = "skills"


def prefixed(name: str, prefix: str = "") -> str:
    """Apply the host's table prefix."""
    return f"{prefix}{name}"


def build_accounts_table(metadata: sa.MetaData, prefix: str = "") -> sa.Table:
    """Minimal declaration of the host accounts table (primary key only)."""
    return sa.Table(
        prefixed(ACCOUNTS_TABLE, prefix),
        metadata,
        sa.Column("acctid", sa.Integer, primary_key=True, autoincrement=True),
        extend_existing=True,
    )


def build_skills_table(
    metadata: sa.MetaData,
    prefix: str = "",
    skills: tuple[SkillDefinition, ...] | None = None,
) -> sa.Table:
    """Build the per-account skills table for the given (or registered) skills.

    The accounts table is declared in ``metadata`` as well if it is not there
    yet, so the foreign key resolves.
    """
    if skills is None:
        skills = list_skills()
    accounts = prefixed(ACCOUNTS_TABLE, prefix)
    if accounts not in metadata.tables:
        build_accounts_table(metadata, prefix)
    name = prefixed(SKILLS_TABLE, prefix)

    columns: list = [
        sa.Column(
            "userid",
            sa.Integer,
            sa.ForeignKey(
                f"{accounts}.acctid",
                ondelete="CASCADE",
                name=f"fk_{name}_userid",
            ),
            primary_key=True,
            autoincrement=False,
        ),
    ]
    for skill in skills:
        columns.append(
            sa.Column(skill.level_column, sa.SmallInteger, nullable=False, server_default="1")
        )
        columns.append(
            sa.Column(skill.experience_column, sa.Integer, nullable=False, server_default="0")
        )
        # Unsigned columns, portable across dialects
        columns.append(
            sa.CheckConstraint(
                f"{skill.level_column} >= 0", name=f"ck_{name}_{skill.level_column}"
            )
        )
        columns.append(
            sa.CheckConstraint(
                f"{skill.experience_column} >= 0", name=f"ck_{name}_{skill.experience_column}"
            )
        )
    columns.append(
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            onupdate=sa.func.now(),
            nullable=False,
        )
    )

    return sa.Table(name, metadata, *columns, extend_existing=True)

