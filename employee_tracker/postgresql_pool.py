"""
PostgreSQL connection manager built on a psycopg2 connection pool.

One pool is created at process start (see app.py) and passed to the
data layer. Statements run one at a time from the menu loop, so the
simple (non-threaded) pool is enough.
"""

import sys
import time
from contextlib import contextmanager
from typing import Any, Dict, List, Optional, Sequence

import psycopg2
from psycopg2 import pool
from psycopg2.extras import RealDictCursor

from .logging_setup import get_logger
from .settings import DatabaseSettings

logger = get_logger(__name__)

SLOW_QUERY_SECONDS = 0.1


class PostgreSQLConnectionPool:
    """psycopg2 connection pool with basic query statistics"""

    def __init__(self, settings: Optional[DatabaseSettings] = None):
        """
        Args:
            settings: connection settings; read from the environment when omitted
        """
        self.settings = settings or DatabaseSettings.from_env()
        self._pool = None

        self._stats = {
            'total_queries_executed': 0,
            'total_query_time': 0.0,
            'slow_queries': 0,
            'errors': 0
        }

    @property
    def is_connected(self) -> bool:
        return self._pool is not None

    def connect(self) -> None:
        """
        Create the pool and verify it with a trivial query.

        A failure here is fatal: it is logged and the process exits with
        status 1.
        """
        if self._pool is not None:
            return

        try:
            self._pool = psycopg2.pool.SimpleConnectionPool(
                minconn=self.settings.min_connections,
                maxconn=self.settings.max_connections,
                **self.settings.connection_params()
            )
            self.query("SELECT 1 AS test")
            logger.info("Connected to PostgreSQL database %s", self.settings.describe())
        except psycopg2.Error as e:
            logger.error("Error connecting to database %s: %s", self.settings.describe(), e)
            self.close()
            sys.exit(1)

    @contextmanager
    def get_connection(self):
        """Borrow a connection from the pool and return it afterwards"""
        if self._pool is None:
            raise psycopg2.InterfaceError("Connection pool is not initialized; call connect() first")

        connection = self._pool.getconn()
        try:
            yield connection
        finally:
            self._pool.putconn(connection)

    @contextmanager
    def get_cursor(self, cursor_factory=RealDictCursor):
        """Cursor that commits on success and rolls back on error"""
        with self.get_connection() as conn:
            cursor = conn.cursor(cursor_factory=cursor_factory)
            try:
                yield cursor
                conn.commit()
            except Exception:
                conn.rollback()
                raise
            finally:
                cursor.close()

    def query(self, sql: str, params: Sequence[Any] = ()) -> List[Dict[str, Any]]:
        """
        Execute a parameter-bound statement.

        Returns:
            List of rows as column-name mappings; empty for statements
            that produce no result set.
        """
        start_time = time.time()
        try:
            with self.get_cursor() as cursor:
                cursor.execute(sql, tuple(params))
                rows = [dict(row) for row in cursor.fetchall()] if cursor.description else []
        except psycopg2.Error as e:
            self._stats['errors'] += 1
            logger.info("Query failed: %s | sql=%s", e, sql)
            raise
        finally:
            query_time = time.time() - start_time
            self._stats['total_query_time'] += query_time
            self._stats['total_queries_executed'] += 1

            if query_time > SLOW_QUERY_SECONDS:
                self._stats['slow_queries'] += 1
                logger.info("Slow query: %.3fs | sql=%s", query_time, sql)

        return rows

    def get_pool_stats(self) -> Dict[str, Any]:
        """Query statistics since the pool was created"""
        executed = self._stats['total_queries_executed']
        avg_query_time = self._stats['total_query_time'] / max(executed, 1)

        return {
            'total_queries': executed,
            'average_query_time_ms': round(avg_query_time * 1000, 2),
            'slow_queries': self._stats['slow_queries'],
            'errors': self._stats['errors'],
        }

    def log_pool_stats(self):
        stats = self.get_pool_stats()
        message = (
            "PostgreSQL pool stats: %s queries, avg %sms, %s slow, %s errors"
        )
        args = (stats['total_queries'], stats['average_query_time_ms'], stats['slow_queries'], stats['errors'])

        if stats['errors'] > 0:
            logger.warning(message, *args)
        else:
            logger.info(message, *args)

    def close(self):
        """Close every pooled connection"""
        if self._pool:
            self._pool.closeall()
            self._pool = None
            logger.info("PostgreSQL connection pool closed")
