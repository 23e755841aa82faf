"""Note endpoints for NoteKeeper.

- POST   /addNote     - Create note for the caller
- POST   /editNote    - Replace a note's title and content
- DELETE /deleteNote  - Delete a note
- POST   /getUserData - Caller's username and notes

Every route requires a bearer token; authentication runs in the
blueprint's before_request hook.

When settings.enforce_note_ownership is on, edit and delete only match
notes owned by the caller. With it off, any authenticated user may edit
or delete any note by id.
"""

import logging

from flask import Blueprint, g, jsonify, request

from ..auth.decorators import authenticate_request
from ..config import settings
from ..db import get_core
from ..exceptions import NotExists
from .schemas import AddNoteRequest, DeleteNoteRequest, EditNoteRequest, NoteResponse
from .validation import validate_request

logger = logging.getLogger(__name__)


notes_bp = Blueprint("notes", __name__)


@notes_bp.before_request
def authenticate():
    """Require a valid bearer token for every notes endpoint."""
    # CORS preflight carries no Authorization header
    if request.method == "OPTIONS":
        return
    authenticate_request()


def _owner_scope() -> int | None:
    return g.user_id if settings.enforce_note_ownership else None


@notes_bp.post("/addNote")
@validate_request
def add_note(data: AddNoteRequest):
    """
    Create a note owned by the authenticated user.

    Returns:
        200 {"addedNoteId": <id>}
        400 NotExists if the token's user has been deleted
    """
    with get_core(atomic=True) as core:
        if core.user.get_by_id(g.user_id) is None:
            raise NotExists("User not exists!", {"user_id": g.user_id})

        note_id = core.note.create(g.user_id, data.note.note_title, data.note.note_content)

    logger.info(f"User {g.username} added note {note_id}")

    return jsonify({"addedNoteId": note_id}), 200


@notes_bp.post("/editNote")
@validate_request
def edit_note(data: EditNoteRequest):
    """
    Replace a note's title and content.

    Returns:
        200 {"message": ..., "updatedNoteId": <id>}
        400 NotExists if no matching note
    """
    with get_core(atomic=True) as core:
        updated_id = core.note.update(
            data.note_id,
            data.note.note_title,
            data.note.note_content,
            owner_id=_owner_scope(),
        )

    if updated_id is None:
        raise NotExists("Note not found", {"note_id": data.note_id})

    return jsonify({
        "message": "Note updated successfully",
        "updatedNoteId": updated_id,
    }), 200


@notes_bp.delete("/deleteNote")
@validate_request
def delete_note(data: DeleteNoteRequest):
    """
    Delete a note by id.

    Deleting an id that matches nothing succeeds unless ownership is
    enforced, in which case the caller learns the note is not theirs.

    Returns:
        200 "Note deleted successfully"
        400 NotExists if ownership is enforced and no owned note matches
    """
    owner_id = _owner_scope()
    with get_core(atomic=True) as core:
        deleted = core.note.delete(data.note_id, owner_id=owner_id)

    if not deleted and owner_id is not None:
        raise NotExists("Note not found", {"note_id": data.note_id})

    return jsonify("Note deleted successfully"), 200


@notes_bp.post("/getUserData")
def get_user_data():
    """
    Return the caller's username and all of their notes.

    Example response:
    ```json
    {
        "username": "alice",
        "existedNotes": [{"id": 1, "note_title": "t", "note_content": "c"}]
    }
    ```
    """
    core = get_core()
    try:
        if core.user.get_by_id(g.user_id) is None:
            raise NotExists("User not found", {"user_id": g.user_id})

        rows = core.note.list_for_user(g.user_id)
    finally:
        core.close()

    notes = [
        NoteResponse(
            id=row["id"],
            note_title=row["note_title"],
            note_content=row["note_content"],
        ).model_dump()
        for row in rows
    ]

    return jsonify({"username": g.username, "existedNotes": notes}), 200
