import logging
import sqlite3
import threading

from chia_lib.sql_functions import create_functions
from config.settings import CHIA_DB_PATH

logger = logging.getLogger(__name__)


class DatabaseManager:
    """
    Hands out one sqlite connection per thread, each with the chia SQL functions registered.
    """

    def __init__(self, db_path=CHIA_DB_PATH, read_only=False):
        self.db_path = db_path
        self.read_only = read_only
        self._local = threading.local()
        self._lock = threading.Lock()
        self._connections = []

    def __enter__(self) -> 'DatabaseManager':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def get_connection(self) -> sqlite3.Connection:
        conn = getattr(self._local, 'conn', None)
        if conn is None:
            conn = self._connect()
            self._local.conn = conn
            with self._lock:
                self._connections.append(conn)
        return conn

    def _connect(self) -> sqlite3.Connection:
        """
        Open a new connection and load the SQL functions into it.
        """
        try:
            if self.read_only:
                conn = sqlite3.connect(f"file:{self.db_path}?mode=ro", uri=True, check_same_thread=False)
            else:
                conn = sqlite3.connect(self.db_path, check_same_thread=False)
            conn.row_factory = sqlite3.Row
            create_functions(conn)
            logger.info(f"Opened database `{self.db_path}` on thread {threading.current_thread().name}.")
            return conn
        except sqlite3.Error as err:
            logger.error(f"Failed to open database `{self.db_path}`: {err}")
            raise

    def execute_query(self, query, params=None, commit=False):
        """
        Execute a SQL query with the given parameters.
        """
        conn = self.get_connection()
        try:
            cursor = conn.execute(query, params or ())
            if commit:
                conn.commit()
                return cursor.rowcount
            return [dict(row) for row in cursor.fetchall()]
        except sqlite3.Error as err:
            logger.error(f"Error executing query: {err}")
            if commit:
                conn.rollback()
            raise

    def query_value(self, query, params=None):
        """
        Execute a query and return the first column of its first row, or None if there are no rows.
        """
        rows = self.get_connection().execute(query, params or ()).fetchmany(1)
        return rows[0][0] if rows else None

    def close(self) -> None:
        with self._lock:
            for conn in self._connections:
                conn.close()
            self._connections.clear()
        self._local = threading.local()
