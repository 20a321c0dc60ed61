"""
Schema initializer.

Runs once at startup, before the API serves traffic. Creates missing tables
and adds columns that were introduced after a table was first created.
Existing data is never touched.
"""

import logging

from sqlalchemy import inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.schema import Column, CreateColumn

import milkcoop.models  # noqa: F401  (registers tables on Base.metadata)
from milkcoop.db import Base

logger = logging.getLogger(__name__)


def _can_add(column: Column) -> bool:
    # Existing rows need a value: only nullable or server-defaulted columns qualify
    return column.nullable or column.server_default is not None


def ensure_schema(engine: Engine) -> list[str]:
    """
    Make sure every table and column of the models exists.

    Returns:
        Names of the columns added to pre-existing tables, as "table.column".

    Raises:
        RuntimeError: if a missing column cannot be added automatically.
    """
    inspector = inspect(engine)
    existing_tables = set(inspector.get_table_names())

    Base.metadata.create_all(bind=engine)

    created = [t for t in Base.metadata.sorted_tables if t.name not in existing_tables]
    for table in created:
        logger.info("Created table %s", table.name)

    missing: list[Column] = []
    for table in Base.metadata.sorted_tables:
        if table.name not in existing_tables:
            continue

        present = {col["name"] for col in inspector.get_columns(table.name)}
        for column in table.columns:
            if column.name in present:
                continue
            if not _can_add(column):
                raise RuntimeError(
                    f"Column {table.name}.{column.name} is missing and has no default"
                )
            missing.append(column)

    added: list[str] = []
    if not missing:
        return added

    with engine.begin() as conn:
        for column in missing:
            ddl = CreateColumn(column).compile(dialect=engine.dialect)
            conn.execute(text(f"ALTER TABLE {column.table.name} ADD COLUMN {ddl}"))
            added.append(f"{column.table.name}.{column.name}")
            logger.info("Added column %s.%s", column.table.name, column.name)

    return added
