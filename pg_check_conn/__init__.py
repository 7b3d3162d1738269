"""
pg_check_conn
Verifies that a PostgreSQL server accepts a connection with the supplied
database, user and credentials.
"""

__version__ = '1.0.0'
