"""Database engine helpers.

This centralizes engine creation so both the container and tests share the
same configuration. By default the SQLite database lives under the project
root in `data/coinpeek.db`.
"""

import os
from typing import Any, Optional, Sequence

from sqlalchemy import Table, create_engine
from sqlalchemy.engine import Engine, make_url

from coinpeek.config import get_settings

from .models import Base


def get_engine(database_url: Optional[str] = None, **kwargs: Any) -> Engine:
    """Return a SQLAlchemy engine, creating the data dir as needed."""
    url = database_url or get_settings().database_url
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite":
        db_location = parsed.database
        if db_location and db_location != ":memory:":
            parent = os.path.dirname(os.path.abspath(db_location))
            os.makedirs(parent, exist_ok=True)
    return create_engine(url, echo=False, future=True, **kwargs)


def init_db(engine: Engine, tables: Optional[Sequence[Table]] = None) -> None:
    """Create the given tables (all mapped tables by default) if missing.

    There are no Alembic migrations; the schema is a single additive table.
    """
    Base.metadata.create_all(engine, tables=list(tables) if tables is not None else None)
