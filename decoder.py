# decoder.py
# Strict decoder from a raw scoreboard payload to models.Response.
#
# Public API:
#   decode_response(raw: Any) -> Response
#   decode_response_text(text: str) -> Response
#
# Either a full Response comes back or DecodeError is raised; one bad
# competition fails the whole payload so a render never mixes feed
# versions. Field rules and defaults live on the models themselves.

from __future__ import annotations

from typing import Any, Dict, Final, Sequence, Union

from pydantic import ValidationError

from models import Response

ROOT: Final[str] = "$"

# pydantic error type -> what the feed should have sent
EXPECTED: Final[Dict[str, str]] = {
    "string_type": "a string",
    "bool_type": "a boolean",
    "int_type": "an integer",
    "int_parsing": "an integer",
    "int_from_float": "an integer",
    "float_type": "a number",
    "float_parsing": "a number",
    "model_type": "an object",
    "model_attributes_type": "an object",
    "dict_type": "an object",
    "list_type": "a list",
    "tuple_type": "a list",
}


class DecodeError(ValueError):
    """Payload did not match the expected shape at `path`."""

    def __init__(self, path: str, expected: str) -> None:
        self.path = path
        self.expected = expected
        super().__init__(f"{path}: expected {expected}")


def json_path(loc: Sequence[Union[str, int]]) -> str:
    """('events', 0, 'status') -> '$.events[0].status'"""
    path = ROOT
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}"
    return path


def _expected(error: Dict[str, Any]) -> str:
    kind = error["type"]
    ctx = error.get("ctx") or {}
    if kind == "value_error":
        return error["msg"].replace("Value error, ", "", 1)
    if kind == "greater_than_equal":
        return f"a value >= {ctx['ge']}"
    if kind == "less_than_equal":
        return f"a value <= {ctx['le']}"
    if kind == "json_invalid":
        return f"valid JSON ({error['msg']})"
    return EXPECTED.get(kind, error["msg"])


def _from_validation_error(err: ValidationError) -> DecodeError:
    """Report the first failure only; the whole payload is rejected anyway."""
    first = err.errors()[0]
    loc = tuple(first["loc"])
    if first["type"] == "missing":
        return DecodeError(json_path(loc[:-1]), f"an object with a field named '{loc[-1]}'")
    return DecodeError(json_path(loc), _expected(first))


def decode_response(raw: Any) -> Response:
    """Decode an already-parsed JSON value. Raises DecodeError."""
    try:
        return Response.model_validate(raw)
    except ValidationError as e:
        raise _from_validation_error(e) from e


def decode_response_text(text: str) -> Response:
    """Parse JSON text, then decode it. Invalid JSON is a DecodeError at '$'."""
    try:
        return Response.model_validate_json(text)
    except ValidationError as e:
        raise _from_validation_error(e) from e
