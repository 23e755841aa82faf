"""Request body validation decorator.

@validate_request inspects the view's signature. Parameters that Flask
supplies from the URL (view_args) pass through unchanged; the remaining
parameter must be annotated with a Pydantic model and is built from the
JSON request body.

    @bp.post("/addNote")
    @validate_request
    def add_note(data: AddNoteRequest):
        ...
"""

import inspect
from functools import wraps

from flask import request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError

# Keys never echoed back in validation error details
REDACTED_KEYS = {"password"}


def _format_errors(exc: PydanticValidationError) -> list[dict]:
    errors = []
    for err in exc.errors():
        errors.append({
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
            "expected_type": err["type"],
        })
    return errors


def _redact(body):
    if not isinstance(body, dict):
        return body
    return {
        key: ("***" if key in REDACTED_KEYS else value)
        for key, value in body.items()
    }


def validate_request(f):
    """
    Validate the JSON body against the view's Pydantic-annotated parameter.

    Raises:
        TypeError: At decoration time if the view has no annotated
            parameters; at request time if the body parameter is not a
            Pydantic model
        ValidationError: If the body does not match the model
    """
    signature = inspect.signature(f)
    params = list(signature.parameters.values())

    if not params:
        raise TypeError(f"{f.__name__} has no parameters to validate")
    if params[0].annotation is inspect.Parameter.empty:
        raise TypeError(f"First parameter of {f.__name__} lacks a type annotation")

    @wraps(f)
    def wrapper(*args, **kwargs):
        view_args = request.view_args or {}

        for param in params:
            if param.name in view_args or param.name in kwargs:
                continue

            model = param.annotation
            if not (inspect.isclass(model) and issubclass(model, BaseModel)):
                raise TypeError(
                    f"Parameter '{param.name}' of {f.__name__} must be annotated "
                    f"with a Pydantic BaseModel subclass"
                )

            body = request.get_json(silent=True)
            if body is None:
                body = {}

            try:
                kwargs[param.name] = model.model_validate(body)
            except PydanticValidationError as e:
                raise ValidationError(
                    "Invalid request data",
                    {
                        "model": model.__name__,
                        "errors": _format_errors(e),
                        "received": _redact(body),
                    }
                )

        return f(*args, **kwargs)

    return wrapper
