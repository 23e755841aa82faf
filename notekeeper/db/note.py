"""Note table operations.

IMPORT CONVENTION:
- Core accesses these through core.note property

OWNERSHIP:
update() and delete() take an optional owner_id. When given, the statement
only matches a note belonging to that user, so the ownership check and the
mutation happen in one statement.
"""

import sqlite3

from ..utils import isodatetime


class NoteOperations:
    """Note operations."""

    def __init__(self, conn: sqlite3.Connection):
        self._conn = conn

    def create(self, user_id: int, note_title: str, note_content: str) -> int:
        """Insert a note for a user.

        Returns:
            The auto-generated note id
        """
        now = isodatetime.now()
        cursor = self._conn.execute(
            """INSERT INTO notes (user_id, note_title, note_content, created_at, updated_at)
               VALUES (?, ?, ?, ?, ?)""",
            (user_id, note_title, note_content, now, now)
        )
        return cursor.lastrowid

    def get_by_id(self, note_id: int) -> sqlite3.Row | None:
        return self._conn.execute(
            "SELECT * FROM notes WHERE id = ?",
            (note_id,)
        ).fetchone()

    def list_for_user(self, user_id: int) -> list[sqlite3.Row]:
        return self._conn.execute(
            """SELECT id, note_title, note_content FROM notes
               WHERE user_id = ?
               ORDER BY id""",
            (user_id,)
        ).fetchall()

    def update(
        self,
        note_id: int,
        note_title: str,
        note_content: str,
        owner_id: int | None = None
    ) -> int | None:
        """Overwrite a note's title and content.

        Args:
            note_id: Note to update
            note_title: New title
            note_content: New content
            owner_id: If given, only update when the note belongs to this user

        Returns:
            The updated note id, or None if nothing matched
        """
        sql = """UPDATE notes SET note_title = ?, note_content = ?, updated_at = ?
                 WHERE id = ?"""
        params = [note_title, note_content, isodatetime.now(), note_id]
        if owner_id is not None:
            sql += " AND user_id = ?"
            params.append(owner_id)

        cursor = self._conn.execute(sql, params)
        return note_id if cursor.rowcount > 0 else None

    def delete(self, note_id: int, owner_id: int | None = None) -> bool:
        """Delete a note.

        Returns:
            True if a row was removed
        """
        sql = "DELETE FROM notes WHERE id = ?"
        params = [note_id]
        if owner_id is not None:
            sql += " AND user_id = ?"
            params.append(owner_id)

        cursor = self._conn.execute(sql, params)
        return cursor.rowcount > 0
