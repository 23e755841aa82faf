"""Utility functions for NoteKeeper.

Import convention: use module-level imports for clarity.

    from utils import isodatetime
    timestamp = isodatetime.now()
    seconds = isodatetime.now_unix()
"""

from . import isodatetime

__all__ = ["isodatetime"]
