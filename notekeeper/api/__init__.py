"""HTTP API for NoteKeeper notes."""
