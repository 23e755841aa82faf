"""Authentication gate for protected endpoints.

- authenticate_request() - verify the bearer token and bind identity to flask.g
- @auth_required - apply authenticate_request() to a single view

The notes blueprint calls authenticate_request() from before_request so
every route in it is protected.
"""

import logging
from functools import wraps

from flask import g, request

from ..exceptions import AuthMissing
from . import token

logger = logging.getLogger(__name__)


def extract_bearer_token(auth_header: str | None) -> str | None:
    """
    Pull the token out of an Authorization header value.

    Returns None unless the header has the form "Bearer <token>".
    """
    if not auth_header:
        return None

    parts = auth_header.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        return None
    return parts[1]


def authenticate_request():
    """
    Verify the request's bearer token.

    Stores authenticated user information in flask.g:
    - g.user_id: User ID
    - g.username: Username

    Raises:
        AuthMissing: No bearer token in the Authorization header (401)
        AuthInvalid: Token failed verification (403)
    """
    token_str = extract_bearer_token(request.headers.get("Authorization"))
    if token_str is None:
        logger.warning("Unauthenticated request to protected endpoint")
        raise AuthMissing("Unauthorized", {"expected": "Authorization: Bearer <token>"})

    payload = token.verify_token(token_str)

    g.user_id = payload.id
    g.username = payload.username

    logger.debug(f"JWT authentication successful for user {g.username}")


def auth_required(f):
    """
    Decorator to require a valid bearer token for endpoint access.

    Example:
    ```python
    @auth_required
    def protected_endpoint():
        user_id = g.user_id
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        authenticate_request()
        return f(*args, **kwargs)

    return wrapper
