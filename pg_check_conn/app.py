"""
Probe Entry Point
Parses the command line, runs the connection probe and reports the outcome.

Exit codes:
    0   - connection succeeded
    N   - libpq connection status of a rejected or failed attempt
    -1  - internal error, malformed arguments, or no connection handle
"""

import sys
from typing import Optional, Sequence, TextIO

from pg_check_conn.config_manager import ConfigManager
from pg_check_conn.database.connection import DEFAULT_DEBUG_ENV, ConnectionProber
from pg_check_conn.options import ParseError, parse_options
from pg_check_conn.outcome import Failure, InternalError, Outcome
from pg_check_conn.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def report(outcome: Outcome, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> int:
    """
    Write the outcome message and return the exit code.

    Connection failures are an expected result and go to stdout; internal
    errors go to stderr. Success is silent.
    """
    if isinstance(outcome, Failure):
        print(f"Error: {outcome.message}", file=stdout or sys.stdout)
    elif isinstance(outcome, InternalError):
        print(f"Error: {outcome.message}", file=stderr or sys.stderr)
    return outcome.exit_code


def main(argv: Optional[Sequence[str]] = None, prober: Optional[ConnectionProber] = None) -> int:
    """Main entry point for the connection probe."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = ConfigManager()
        setup_logging()

        parsed = parse_options(argv)
        if isinstance(parsed, ParseError):
            logger.debug(f"Rejected arguments: {parsed.message}")
            return report(InternalError(parsed.message))

        if prober is None:
            debug_env = config.get_probe_config().get('debug_env') or DEFAULT_DEBUG_ENV
            prober = ConnectionProber(debug_env=debug_env)

        outcome = prober.probe(parsed)
    except Exception as e:
        logger.debug(f"Probe failed: {e}", exc_info=True)
        outcome = InternalError(str(e))

    return report(outcome)


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == '__main__':
    run()
