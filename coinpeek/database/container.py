"""Persistence container: schema, configuration and the container itself.

A ``ModelContainer`` owns one SQLAlchemy engine and the session factory bound
to it. The GUI builds exactly one at startup and hands it down to the views
that need to read or write items.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence

from sqlalchemy import Table, inspect, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import NoInspectionAvailable
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from coinpeek.config import get_settings
from coinpeek.utils.logger import get_logger

from .engine import get_engine, init_db
from .models import Base

logger = get_logger(__name__)

IN_MEMORY_URL = "sqlite://"


class ContainerError(RuntimeError):
    """Raised when a schema is invalid or the store cannot be opened."""


class Schema:
    """Ordered set of mapped model classes stored together."""

    def __init__(self, models: Iterable[type]):
        unique: List[type] = []
        for model in models:
            try:
                mapper = inspect(model)
            except NoInspectionAvailable as exc:
                raise ContainerError(f"{model!r} is not a mapped model") from exc
            if mapper.class_.metadata is not Base.metadata:
                raise ContainerError(
                    f"{model.__name__} is not declared on the shared Base"
                )
            if model not in unique:
                unique.append(model)
        if not unique:
            raise ContainerError("Schema must list at least one model")
        self.models: List[type] = unique

    @property
    def metadata(self):
        return Base.metadata

    @property
    def tables(self) -> List[Table]:
        return [model.__table__ for model in self.models]

    def __contains__(self, model: type) -> bool:
        return model in self.models

    def __repr__(self) -> str:
        names = ", ".join(m.__name__ for m in self.models)
        return f"Schema([{names}])"


@dataclass
class ModelConfiguration:
    """Where and how a schema is stored.

    Durable configurations use ``url`` when given and the configured default
    database otherwise. In-memory configurations ignore ``url``.
    """

    schema: Optional[Schema] = None
    is_stored_in_memory_only: bool = False
    url: Optional[str] = None
    name: str = "default"

    @property
    def is_durable(self) -> bool:
        return not self.is_stored_in_memory_only

    def resolve_url(self) -> str:
        if self.is_stored_in_memory_only:
            return IN_MEMORY_URL
        return self.url or get_settings().database_url


@dataclass
class ModelContainer:
    """Owns the engine and sessions for one schema.

    Construction creates missing tables and checks the store is reachable;
    any failure surfaces as ``ContainerError``.
    """

    schema: Schema
    configurations: Sequence[ModelConfiguration] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not isinstance(self.schema, Schema):
            self.schema = Schema(self.schema)
        if not self.configurations:
            self.configurations = [ModelConfiguration(schema=self.schema)]
        self.configuration = self.configurations[0]
        if self.configuration.schema is None:
            self.configuration.schema = self.schema

        url = self.configuration.resolve_url()
        engine: Optional[Engine] = None
        try:
            if self.configuration.is_stored_in_memory_only:
                engine = get_engine(
                    url,
                    connect_args={"check_same_thread": False},
                    poolclass=StaticPool,
                )
            else:
                engine = get_engine(url)
            init_db(engine, self.schema.tables)
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
        except Exception as exc:
            # Missing drivers surface as ImportError, bad paths as OSError.
            if engine is not None:
                engine.dispose()
            raise ContainerError(str(exc) or type(exc).__name__) from exc
        self.engine: Engine = engine

        self._session_factory = sessionmaker(
            bind=self.engine, autoflush=False, autocommit=False, expire_on_commit=False
        )
        self._main_context: Optional[Session] = None
        logger.info(
            "Model container ready (%s, %s)",
            "in-memory" if self.configuration.is_stored_in_memory_only else url,
            self.schema,
        )

    def new_context(self) -> Session:
        """Return a fresh session; the caller closes it."""
        return self._session_factory()

    @property
    def main_context(self) -> Session:
        """Session owned by the container, created on first use."""
        if self._main_context is None:
            self._main_context = self.new_context()
        return self._main_context

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Session that commits on success and rolls back on error."""
        session = self.new_context()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def dispose(self) -> None:
        if self._main_context is not None:
            self._main_context.close()
            self._main_context = None
        self.engine.dispose()
