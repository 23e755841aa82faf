"""Exception hierarchy for NoteKeeper.

Every error carries an HTTP status code so the Flask error handlers in
main.py can render it without a per-type lookup table.
"""


class NoteKeeperError(Exception):
    """Base exception for all NoteKeeper errors."""

    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class AuthMissing(NoteKeeperError):
    """No bearer token was supplied."""

    status_code = 401


class AuthInvalid(NoteKeeperError):
    """Bearer token failed signature, format or expiry checks."""

    status_code = 403


class DuplicateUsername(NoteKeeperError):
    """Registration attempted with a username that is already taken."""

    status_code = 400


class UserNotFound(NoteKeeperError):
    """Login attempted for a username that does not exist."""

    status_code = 404


class IncorrectPassword(NoteKeeperError):
    """Password did not match the stored hash."""

    status_code = 401


class PersistenceError(NoteKeeperError):
    """Storage layer failed to execute a statement."""

    status_code = 400


class NotExists(NoteKeeperError):
    """Referenced user or note does not exist."""

    status_code = 400


class ValidationError(NoteKeeperError):
    """Request data failed validation."""

    status_code = 400


class CredentialHashError(NoteKeeperError):
    """Password hashing library failed."""

    status_code = 500
