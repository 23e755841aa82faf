"""Database module for NoteKeeper.

This module provides the Core storage handle. Core owns a single SQLite
connection and exposes per-table operations:

    with get_core(atomic=True) as core:
        user_id = core.user.create("alice", password_hash, "Alice A")
        core.note.create(user_id, "title", "content")
        # Both statements commit together on exit

Components never reach for a global connection; they receive a Core (or a
bare connection wrapped in one) so tests can hand in an in-memory database.
"""

import logging
import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING

from ..config import settings
from ..schema import SCHEMA_PATH

if TYPE_CHECKING:
    from .note import NoteOperations
    from .user import UserOperations

logger = logging.getLogger(__name__)


class Core:
    """
    Storage handle with user and note operations.

    Connection Lifecycle:
    - atomic=True: commit or rollback and close on __exit__
    - atomic=False: caller commits; connection closes with close() or on GC
    """

    def __init__(self, connection: sqlite3.Connection, atomic: bool = False):
        """Initialize Core with a database connection.

        Args:
            connection: SQLite connection with row_factory set to sqlite3.Row
            atomic: If True, Core MUST be used as context manager.
        """
        self._conn = connection
        self._atomic = atomic
        self._user_ops = None
        self._note_ops = None

    @property
    def user(self) -> "UserOperations":
        """User operations, created on first access."""
        if self._user_ops is None:
            from .user import UserOperations
            self._user_ops = UserOperations(self._conn)
        return self._user_ops

    @property
    def note(self) -> "NoteOperations":
        """Note operations, created on first access."""
        if self._note_ops is None:
            from .note import NoteOperations
            self._note_ops = NoteOperations(self._conn)
        return self._note_ops

    def commit(self) -> None:
        self._conn.commit()

    def close(self) -> None:
        self._conn.close()

    def __enter__(self) -> "Core":
        """Enter context manager for atomic transaction.

        Raises:
            RuntimeError: If Core was not created with atomic=True
        """
        if not self._atomic:
            raise RuntimeError(
                "Core must be created with atomic=True for context manager use. "
                "Use: with db.get_core(atomic=True) as core:"
            )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Commit on clean exit, rollback otherwise, then close."""
        try:
            if exc_type is None:
                self._conn.commit()
            else:
                self._conn.rollback()
        finally:
            self._conn.close()


def _create_connection() -> sqlite3.Connection:
    """Create a fresh database connection.

    Returns:
        SQLite connection with row_factory set to sqlite3.Row
        and foreign keys enabled.
    """
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys = ON")
    return conn


def get_core(atomic: bool = False) -> Core:
    """
    Get a database Core instance backed by a new connection.

    Args:
        atomic: If True, returns a Core that MUST be used as context manager.
                All operations inside the block commit together.

    Returns:
        Core instance with user/note operations
    """
    return Core(_create_connection(), atomic=atomic)


# ============================================================================
# DATABASE INITIALIZATION
# ============================================================================

def apply_schema(conn: sqlite3.Connection) -> None:
    """Run schema.sql against a connection."""
    conn.executescript(SCHEMA_PATH.read_text())
    conn.commit()


def init_db():
    """Initialize database by running schema.sql if not already initialized."""
    db_path = Path(settings.database_path)
    db_path.parent.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(str(db_path))
    try:
        cursor = conn.execute(
            "SELECT name FROM sqlite_master WHERE type='table' AND name='_schema_metadata'"
        )
        if cursor.fetchone():
            # Database already initialized, skip
            return

        apply_schema(conn)
        logger.info(f"Applied schema to {db_path}")
    finally:
        conn.close()
