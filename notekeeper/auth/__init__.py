"""Authentication module for NoteKeeper.

This module provides the authentication and authorization boundary:
- Password hashing and verification (service)
- Registration and login orchestration (service)
- JWT token generation and validation (token)
- Bearer-token gate for protected endpoints (decorators)

Auth endpoints (no token required):
- POST /register - Create account
- POST /login - Authenticate and return JWT token

Account endpoint (token required):
- DELETE /deleteUser - Delete the caller's account and notes
"""

from . import schemas, service, token

__all__ = ["schemas", "service", "token"]
