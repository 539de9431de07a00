"""Input Parsing — raw request input → typed, fallible parse → validated value.

Invariants:
    - Every parser returns Ok(value) or Invalid(errors); none of them raise
    - Invalid.errors carries no raw input values (bodies contain email addresses)
    - parse_identifier accepts integer literals only ("abc", "1.5", "" are Invalid)

Design Decisions:
    - Tagged result over exceptions: every handler branches on the same two shapes
    - pydantic does both coercion and validation; JSON decoding included, so a
      malformed body is just another Invalid
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar, Union

from pydantic import BaseModel, TypeAdapter, ValidationError

from users_api.core.domain_types import UserId
from users_api.schemas.user import UserCreate, UserReplace

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful parse."""
    value: T


@dataclass(frozen=True)
class Invalid:
    """Failed parse — errors in pydantic's error-list shape."""
    errors: list[dict] = field(default_factory=list)


ParseResult = Union[Ok[T], Invalid]

_IDENTIFIER = TypeAdapter(int)


def _errors(exc: ValidationError) -> list[dict]:
    return exc.errors(include_url=False, include_context=False, include_input=False)


def parse_identifier(raw: str) -> ParseResult[UserId]:
    """Coerce a path segment to a user id."""
    try:
        value = _IDENTIFIER.validate_python(raw)
    except ValidationError as e:
        return Invalid(_errors(e))
    return Ok(UserId(value))


def _parse_body(model: type[M], raw: bytes) -> ParseResult[M]:
    try:
        return Ok(model.model_validate_json(raw))
    except ValidationError as e:
        return Invalid(_errors(e))


def parse_user_create(raw: bytes) -> ParseResult[UserCreate]:
    """Parse a POST / body."""
    return _parse_body(UserCreate, raw)


def parse_user_replace(raw: bytes) -> ParseResult[UserReplace]:
    """Parse a PUT /{id} body (scalars coerced to strings)."""
    return _parse_body(UserReplace, raw)
