"""Account endpoints for NoteKeeper.

- POST   /register   - Create account (no token)
- POST   /login      - Authenticate and return JWT token (no token)
- DELETE /deleteUser - Delete the caller's account and notes (token)

All endpoints return JSON responses with a "message" field.
"""

import logging

from flask import Blueprint, g, jsonify

from ..api.validation import validate_request
from ..db import get_core
from ..exceptions import IncorrectPassword, NotExists, UserNotFound
from . import service
from .decorators import auth_required
from .schemas import LoginResponse, MessageResponse, UserCreate, UserLogin

logger = logging.getLogger(__name__)


auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/register", methods=["POST"])
@validate_request
def register(data: UserCreate):
    """
    Create a user account. No token is issued; the client logs in next.

    Example request:
    ```json
    {"username": "alice", "password": "pw1", "fullname": "Alice A"}
    ```

    Returns:
        200 with confirmation message
        400 DuplicateUsername / PersistenceError / ValidationError
    """
    with get_core(atomic=True) as core:
        user = service.register(core, data)

    logger.info(f"Registered user: {user.username}")

    return jsonify(
        MessageResponse(
            message="Thank you very much for registering! Please proceed to log in."
        ).model_dump()
    ), 200


@auth_bp.route("/login", methods=["POST"])
@validate_request
def login(data: UserLogin):
    """
    Authenticate and return a JWT token.

    Example response:
    ```json
    {"message": "You are logged in!", "token": "eyJhbGciOiJIUzI1NiIs..."}
    ```

    Returns:
        200 with token
        401 IncorrectPassword, 404 UserNotFound
    """
    with get_core(atomic=True) as core:
        try:
            user, access_token = service.login(core, data.username, data.password)
        except (UserNotFound, IncorrectPassword):
            logger.warning(f"Failed login attempt for username: {data.username}")
            raise

    logger.info(f"Successful login: {user.username}")

    return jsonify(
        LoginResponse(message="You are logged in!", token=access_token).model_dump()
    ), 200


@auth_bp.route("/deleteUser", methods=["DELETE"])
@auth_required
def delete_user():
    """
    Delete the authenticated user and all of their notes.

    Identity comes from the token. Tokens already issued for this user are
    not revoked.
    """
    with get_core(atomic=True) as core:
        deleted = service.delete_account(core, g.user_id)

    if not deleted:
        raise NotExists("User not found", {"user_id": g.user_id})

    logger.info(f"Deleted user: {g.username}")

    return jsonify(MessageResponse(message="User deleted successfully").model_dump()), 200
