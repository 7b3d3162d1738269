"""
Database Connection Module
Builds the libpq connection string and performs the single connection attempt.

The password is never handled here: libpq reads PGPASSWORD (or ~/.pgpass)
itself while connecting.
"""

import os
import sys
from contextlib import contextmanager
from typing import Callable, Generator, Optional, TextIO

from psycopg import pq
from psycopg.conninfo import make_conninfo

from pg_check_conn.options import ParsedOptions
from pg_check_conn.outcome import Failure, InternalError, Outcome, Success
from pg_check_conn.utils.logger import LoggerMixin

DEFAULT_DEBUG_ENV = 'PGDEBUG'

# libpq keyword for each ParsedOptions field, in emission order
CONNINFO_KEYWORDS = [
    ('database', 'dbname'),
    ('username', 'user'),
    ('host_address', 'hostaddr'),
    ('host', 'host'),
    ('port', 'port'),
    ('timeout', 'connect_timeout'),
]

Connector = Callable[[bytes], pq.PGconn]


def build_conninfo(options: ParsedOptions) -> str:
    """
    Build a libpq connection string from parsed options.

    Only present fields are emitted. hostaddr and host may both appear:
    hostaddr skips name resolution while host is still used for TLS and
    authentication naming.
    """
    params = {}
    for field, keyword in CONNINFO_KEYWORDS:
        value = getattr(options, field)
        if value:
            params[keyword] = value

    return make_conninfo('', **params)


def error_message(pgconn: Optional[pq.PGconn]) -> str:
    """Decode libpq's error message for a handle."""
    if pgconn is None:
        return 'could not allocate a connection handle'
    message = pgconn.error_message.decode('utf-8', 'replace').rstrip()
    return message or 'connection failed'


@contextmanager
def open_connection(
    conninfo: str,
    connect: Connector = pq.PGconn.connect,
) -> Generator[pq.PGconn, None, None]:
    """
    Open a libpq connection handle and release it on exit.

    Usage:
        with open_connection("dbname=app") as pgconn:
            pgconn.status
    """
    pgconn = connect(conninfo.encode('utf-8'))
    try:
        yield pgconn
    finally:
        pgconn.finish()


class ConnectionProber(LoggerMixin):
    """Performs one connection attempt and classifies the result."""

    def __init__(
        self,
        connect: Connector = pq.PGconn.connect,
        debug_env: str = DEFAULT_DEBUG_ENV,
        stdout: Optional[TextIO] = None,
    ):
        self._connect = connect
        self._debug_env = debug_env
        self._stdout = stdout

    def _debug_enabled(self) -> bool:
        return os.environ.get(self._debug_env) == '1'

    def _echo(self, conninfo: str) -> None:
        stream = self._stdout or sys.stdout
        print(f"Conn string: {conninfo}", file=stream)
        stream.flush()

    def probe(self, options: ParsedOptions) -> Outcome:
        """
        Attempt to connect with the given options.

        Returns:
            Success, Failure carrying libpq's message and status, or
            InternalError for anything unexpected.
        """
        try:
            conninfo = build_conninfo(options)
        except Exception as e:
            self.logger.debug(f"Could not build connection string: {e}")
            return InternalError(str(e))

        if self._debug_enabled():
            self._echo(conninfo)

        target = options.host_address or options.host or 'default host'
        self.logger.info(f"Connecting to {target} (database={options.database}, user={options.username})")

        try:
            with open_connection(conninfo, self._connect) as pgconn:
                return self._classify(pgconn)
        except MemoryError:
            # PQconnectdb returned NULL
            self.logger.debug("libpq did not return a connection handle")
            return Failure(error_message(None), None)
        except Exception as e:
            self.logger.debug(f"Connection attempt failed unexpectedly: {e}")
            return InternalError(str(e))

    def _classify(self, pgconn: pq.PGconn) -> Outcome:
        status = pgconn.status
        if status == pq.ConnStatus.OK:
            self.logger.info("Connection established")
            return Success()

        message = error_message(pgconn)
        self.logger.info(f"Connection rejected with status {int(status)}: {message}")
        return Failure(message, int(status))
