"""SQLAlchemy wrapper around a database: table discovery, schema description, command execution."""

import logging
from typing import Any, Optional

from sqlalchemy import MetaData, Table, create_engine, inspect, select
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.schema import CreateTable

from ..exceptions import ActionExecutionError, ConfigurationError, UnknownResourceError

logger = logging.getLogger(__name__)


def _format_value(value: Any) -> str:
    return "" if value is None else str(value)


def format_rows(columns: list[str], rows: list[Any], include_column_names: bool = True) -> str:
    """Tab-separated table text: optional header row, then one line per row."""
    lines = []
    if include_column_names:
        lines.append("\t".join(columns))
    lines.extend("\t".join(_format_value(v) for v in row) for row in rows)
    return "\n".join(lines)


class SQLDatabase:
    """
    Action target for SQL chains. Works with any SQLAlchemy dialect
    (Oracle via ``oracle+oracledb://``, PostgreSQL, SQLite, ...).

    The schema description follows Rajkumar et al. 2022 (https://arxiv.org/abs/2204.00498):
    CREATE TABLE statements, optionally followed by a few sample rows per table.
    """

    def __init__(
        self,
        engine: Engine,
        schema: Optional[str] = None,
        include_tables: Optional[list[str]] = None,
        ignore_tables: Optional[list[str]] = None,
        sample_rows_in_table_info: int = 3,
    ):
        if include_tables and ignore_tables:
            raise ConfigurationError("include_tables", "Cannot specify both include_tables and ignore_tables")
        self._engine = engine
        self._schema = schema
        self._include_tables = list(include_tables or [])
        self._ignore_tables = list(ignore_tables or [])
        self._sample_rows_in_table_info = sample_rows_in_table_info

    @classmethod
    def from_uri(
        cls,
        database_uri: str,
        username: Optional[str] = None,
        password: Optional[str] = None,
        engine_args: Optional[dict[str, Any]] = None,
        **kwargs: Any,
    ) -> "SQLDatabase":
        """Create a database from a SQLAlchemy URL; credentials, if given, override the URL's."""
        url = make_url(database_uri)
        if username:
            url = url.set(username=username)
        if password:
            url = url.set(password=password)
        logger.info("Connecting to %s database", url.get_backend_name())
        engine = create_engine(url, **(engine_args or {}))
        return cls(engine, **kwargs)

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def dialect(self) -> str:
        """Dialect name, lowercase (e.g. "oracle", "sqlite", "postgresql")."""
        return self._engine.dialect.name.lower()

    def get_usable_table_names(self) -> list[str]:
        """Names of tables available to chains."""
        if self._include_tables:
            return list(self._include_tables)
        try:
            all_tables = inspect(self._engine).get_table_names(schema=self._schema)
        except SQLAlchemyError as e:
            raise ActionExecutionError("sql", f"Could not list tables: {e}") from e
        return [t for t in all_tables if t not in self._ignore_tables]

    def resolve_table_names(self, table_names: list[str]) -> list[str]:
        """Map requested names to the database spelling, case-insensitively.

        Raises UnknownResourceError naming every requested table that does not exist.
        """
        by_lower = {name.lower(): name for name in self.get_usable_table_names()}
        missing = [name for name in table_names if name.lower() not in by_lower]
        if missing:
            raise UnknownResourceError(missing)
        return [by_lower[name.lower()] for name in table_names]

    def get_table_info(self, table_names: Optional[list[str]] = None) -> str:
        """Schema description for the given tables, or for every usable table when None."""
        if table_names is None:
            names = self.get_usable_table_names()
        else:
            names = self.resolve_table_names(table_names)
        if not names:
            return ""

        metadata = MetaData()
        try:
            metadata.reflect(bind=self._engine, schema=self._schema, only=names)
        except SQLAlchemyError as e:
            raise ActionExecutionError("sql", f"Could not reflect tables {names}: {e}") from e

        tables = []
        for name in names:
            key = f"{self._schema}.{name}" if self._schema else name
            table = metadata.tables[key]
            table_info = str(CreateTable(table).compile(self._engine)).rstrip()
            if self._sample_rows_in_table_info > 0:
                table_info += f"\n\n/*\n{self.get_sample_rows(table)}\n*/"
            tables.append(table_info)
        return "\n\n".join(tables)

    def get_sample_rows(self, table: Table) -> str:
        command = select(table).limit(self._sample_rows_in_table_info)
        try:
            with self._engine.connect() as connection:
                result = connection.execute(command)
                columns = list(result.keys())
                rows = result.fetchall()
        except SQLAlchemyError as e:
            logger.warning("Could not sample rows from %s: %s", table.name, e)
            return f"{self._sample_rows_in_table_info} rows from {table.name} table: unavailable"
        return (
            f"{self._sample_rows_in_table_info} rows from {table.name} table:\n"
            f"{format_rows(columns, rows)}"
        )

    def run(self, command: str, include_column_names: bool = True) -> str:
        """Execute a SQL command and return its result as text.

        Statements returning rows give a tab-separated table; other statements
        give ``"Update Count: N"``. Database errors raise ActionExecutionError.
        """
        logger.debug("Run SQL command: %s", command)
        if not command.strip():
            raise ActionExecutionError("sql", "Empty SQL command")
        try:
            with self._engine.begin() as connection:
                # Driver-level execution: generated SQL may contain ":name" literals.
                result = connection.exec_driver_sql(command)
                if result.returns_rows:
                    return format_rows(list(result.keys()), result.fetchall(), include_column_names)
                return f"Update Count: {result.rowcount}"
        except SQLAlchemyError as e:
            raise ActionExecutionError("sql", str(e)) from e

    def close(self) -> None:
        self._engine.dispose()

    def __enter__(self) -> "SQLDatabase":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()
