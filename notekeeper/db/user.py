"""User table operations.

IMPORT CONVENTION:
- Core accesses these through core.user property
- NO direct import needed when using Core API
"""

import sqlite3

from ..exceptions import DuplicateUsername
from ..utils import isodatetime


class UserOperations:
    """User operations.

    Username uniqueness is enforced by the UNIQUE constraint on
    users.username, so create() is a single insert with no prior lookup.
    """

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def create(self, username: str, password_hash: str, fullname: str) -> int:
        """Insert a user row.

        Args:
            username: Unique login name
            password_hash: Opaque bcrypt hash
            fullname: Display name

        Returns:
            The auto-generated user id

        Raises:
            DuplicateUsername: If the username is already taken
            sqlite3.IntegrityError: For any other constraint failure
        """
        try:
            cursor = self._conn.execute(
                """INSERT INTO users (username, password_hash, fullname, created_at)
                   VALUES (?, ?, ?, ?)""",
                (username, password_hash, fullname, isodatetime.now())
            )
        except sqlite3.IntegrityError as e:
            if e.sqlite_errorname != "SQLITE_CONSTRAINT_UNIQUE":
                raise
            raise DuplicateUsername(
                "Username already exists!",
                {"username": username}
            )
        return cursor.lastrowid

    def get_by_id(self, user_id: int) -> sqlite3.Row | None:
        return self._conn.execute(
            "SELECT id, username, fullname, created_at FROM users WHERE id = ?",
            (user_id,)
        ).fetchone()

    def get_by_username(self, username: str) -> sqlite3.Row | None:
        return self._conn.execute(
            "SELECT id, username, fullname, created_at FROM users WHERE username = ?",
            (username,)
        ).fetchone()

    def get_with_password(self, username: str) -> sqlite3.Row | None:
        """Get user row including password_hash, for credential checks only."""
        return self._conn.execute(
            "SELECT * FROM users WHERE username = ?",
            (username,)
        ).fetchone()

    def delete(self, user_id: int) -> bool:
        """Delete a user and all of their notes.

        Notes are removed explicitly as well as by ON DELETE CASCADE so the
        result does not depend on the connection's foreign_keys pragma.

        Returns:
            True if a user row was removed
        """
        self._conn.execute("DELETE FROM notes WHERE user_id = ?", (user_id,))
        cursor = self._conn.execute("DELETE FROM users WHERE id = ?", (user_id,))
        return cursor.rowcount > 0
