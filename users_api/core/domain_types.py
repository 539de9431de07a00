"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int — the store assigns new ids; parse_identifier only wraps ids read from a path
    - Every envelope status, handler outcome and failure message is an Enum member
    - Outcome → HTTP status mapping lives here and nowhere else

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Transport status derived from Outcome, never from exceptions: a store failure
      is still HTTP 200 with status=fail in the body
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)


# ─── Enums ───────────────────────────────────────────────────────

class EnvelopeStatus(str, Enum):
    """Application-level status carried in every response body."""
    SUCCESS = "success"
    FAIL = "fail"


class Outcome(str, Enum):
    """What happened in a handler, independent of the HTTP code it maps to."""
    SUCCESS = "success"
    INVALID_IDENTIFIER = "invalid_identifier"
    INVALID_INPUT = "invalid_input"
    STORE_FAILURE = "store_failure"


class FailureMessage(str, Enum):
    """Client-facing failure messages. Wording is part of the public contract."""
    INVALID_IDENTIFIER = "no identifier found"
    INVALID_INPUT = "input validation failed"
    LIST_FAILED = "unable to get all users"
    CREATE_FAILED = "unable to create user"
    NOT_FOUND = "user not found"
    UPDATE_FAILED = "unable to update user"
    DELETE_FAILED = "unable to delete user"


class DataKey(str, Enum):
    """Fixed keys under envelope.data."""
    USERS = "users"
    USER = "user"


# ADR: 404 for a bad body and 200 for store failures are kept for
# compatibility with existing clients of this API
HTTP_STATUS_BY_OUTCOME: dict[Outcome, int] = {
    Outcome.SUCCESS: 200,
    Outcome.INVALID_IDENTIFIER: 400,
    Outcome.INVALID_INPUT: 404,
    Outcome.STORE_FAILURE: 200,
}
