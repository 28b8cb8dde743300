"""SQLAlchemy-backed query executor.

Runs compiled queries through ``Connection.exec_driver_sql`` so the ``?``
placeholders reach the DBAPI driver untouched. Drivers with the qmark
paramstyle (sqlite3, pyodbc, ...) are supported.
"""

import time
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Optional, Sequence

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine
from sqlalchemy.exc import ArgumentError, OperationalError

from sqlpager.common.exceptions import (
    SQLPagerError,
    configuration_error,
    connection_error,
    query_execution_error,
)
from sqlpager.logging import get_logger
from sqlpager.utils.decorators import retry_with_backoff, traced

if TYPE_CHECKING:
    from sqlpager.settings import ExecutorSettings

logger = get_logger(__name__)

_MAX_STATEMENT_ATTRIBUTE_LENGTH = 4096


class SQLAlchemyExecutor:
    """Executor satisfying ``QueryExecutor`` on top of a SQLAlchemy engine.

    Features:
        - Lazy engine creation with connection pooling
        - Optional retry with exponential backoff on ``OperationalError``
        - Structured logging and OpenTelemetry spans per query
        - Driver errors wrapped as ``ExecutionError``

    Example:
        >>> executor = SQLAlchemyExecutor(get_settings().executor)
        >>> executor.execute("SELECT * FROM users WHERE id = ?", [1])
        [{'id': 1, 'name': 'ada'}]
    """

    def __init__(self, settings: Optional['ExecutorSettings'] = None, engine: Optional[Engine] = None):
        """Initialize the executor.

        Args:
            settings: Connection settings. Defaults to ``get_settings().executor``.
            engine: Pre-built engine to use instead of creating one from settings.
        """
        if settings is None:
            from sqlpager.settings import get_settings
            settings = get_settings().executor

        self.settings = settings
        self._engine: Optional[Engine] = engine
        self._connection_info: Dict[str, Any] = {
            "platform": engine.dialect.name if engine is not None else settings.backend_name,
        }

        self._run = self._run_once
        if settings.max_retries:
            self._run = retry_with_backoff(
                max_retries=settings.max_retries,
                initial_delay=settings.retry_delay_seconds,
                retry_on=(OperationalError,),
            )(self._run_once)

    @property
    def engine(self) -> Engine:
        """Get or create SQLAlchemy engine with lazy initialization.

        Returns:
            Engine: Configured SQLAlchemy engine
        """
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        """Create SQLAlchemy engine with connection pooling.

        Raises:
            SQLPagerError: CONFIG_ERROR if the URL names an unknown dialect or
                driver, or it is missing options the dialect requires
            ExecutionError: CONNECTION_ERROR if engine creation fails otherwise
        """
        platform = self._connection_info["platform"]
        engine_kwargs: Dict[str, Any] = {"pool_pre_ping": True}
        if platform != "sqlite":
            engine_kwargs.update(
                pool_size=self.settings.pool_size,
                max_overflow=self.settings.max_overflow,
                pool_timeout=self.settings.pool_timeout,
            )

        try:
            engine = create_engine(self.settings.database_url, **engine_kwargs)
        except ArgumentError as e:
            raise configuration_error(
                f"Invalid {platform} engine configuration",
                config_key="executor.database_url",
                cause=e
            )
        except Exception as e:
            raise connection_error(
                f"Failed to create {platform} engine",
                service=platform,
                cause=e
            )

        logger.info(f"Created {platform} engine", extra={"db.platform": platform})
        return engine

    @contextmanager
    def _get_connection(self) -> Iterator[Connection]:
        """Get a database connection from the pool."""
        conn = self.engine.connect()
        try:
            yield conn
        finally:
            conn.close()

    def _run_once(self, sql_text: str, parameters: Sequence[Any]) -> List[Dict[str, Any]]:
        with self._get_connection() as conn:
            result = conn.exec_driver_sql(sql_text, tuple(parameters))
            if not result.returns_rows:
                return []
            return [dict(row) for row in result.mappings().all()]

    def _span_attributes(self, sql_text: str, parameters: Sequence[Any]) -> Dict[str, Any]:
        """Build OpenTelemetry span attributes for a query."""
        statement = (sql_text or "").strip()
        if len(statement) > _MAX_STATEMENT_ATTRIBUTE_LENGTH:
            statement = f"{statement[:_MAX_STATEMENT_ATTRIBUTE_LENGTH - 3]}..."

        return {
            "db.system": self._connection_info["platform"],
            "db.operation": "SELECT",
            "db.statement": statement,
            "db.parameters.count": len(parameters),
        }

    @traced(
        span_name="sqlpager.executor.execute",
        attribute_getter=lambda self, sql_text, parameters: self._span_attributes(sql_text, parameters),
    )
    def execute(self, sql_text: str, parameters: Sequence[Any]) -> List[Dict[str, Any]]:
        """Execute a parameterized query and fetch all rows as dictionaries.

        Args:
            sql_text: SQL with ``?`` placeholders
            parameters: Values in placeholder order

        Returns:
            Rows as dictionaries keyed by column label

        Raises:
            ExecutionError: If the driver fails
            SQLPagerError: If the engine cannot be created, unchanged
        """
        start_time = time.time()
        payload: Dict[str, Any] = {
            "db.platform": self._connection_info["platform"],
            "query.parameter_count": len(parameters),
        }

        try:
            rows = self._run(sql_text, parameters)
        except SQLPagerError:
            raise
        except Exception as exc:
            duration = time.time() - start_time
            logger.error(
                "Query failed",
                extra={**payload, "duration.seconds": f"{duration:.6f}", "error": str(exc)},
            )
            raise query_execution_error(sql_text, exc)

        duration = time.time() - start_time
        logger.info(
            "Results fetched",
            extra={**payload, "row_count": len(rows), "duration.seconds": f"{duration:.6f}"},
        )
        return rows

    def test_connection(self) -> bool:
        """Test if connection to the database is working."""
        try:
            rows = self.execute("SELECT 1 AS test", [])
            return bool(rows) and rows[0]["test"] == 1
        except Exception as exc:
            logger.error(
                "SQL connection test failed",
                extra={"db.platform": self._connection_info["platform"], "error": str(exc)},
            )
            return False

    def get_connection_info(self) -> Dict[str, Any]:
        """Get connection information for debugging/logging."""
        return self._connection_info.copy()

    def dispose(self) -> None:
        """Release pooled connections."""
        if self._engine is not None:
            self._engine.dispose()
