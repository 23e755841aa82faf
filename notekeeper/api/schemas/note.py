"""Note request and response schemas."""

from pydantic import BaseModel, ConfigDict, Field

from ...auth.schemas import MAX_ROW_ID


class NoteFields(BaseModel):
    """Title and content of a note as sent by clients."""

    note_title: str = Field(default="", description="Note title")
    note_content: str = Field(default="", description="Note body")


class AddNoteRequest(BaseModel):
    note: NoteFields


class EditNoteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    note: NoteFields
    note_id: int = Field(..., alias="noteId", ge=1, le=MAX_ROW_ID)


class DeleteNoteRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    note_id: int = Field(..., alias="noteIdToDelete", ge=1, le=MAX_ROW_ID)


class NoteResponse(BaseModel):
    id: int
    note_title: str
    note_content: str
