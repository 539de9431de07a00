"""Response Envelope — the uniform {status, message?, data?} body and handler results.

Invariants:
    - message present only when status=fail; data present only when status=success
    - Absent fields are omitted from the JSON body (never null)
    - HandlerResult keeps application outcome and transport status as separate fields

Design Decisions:
    - Payloads dumped to plain dicts at construction: the envelope never holds ORM objects
    - http_status derived from Outcome via HTTP_STATUS_BY_OUTCOME, not from exceptions
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from users_api.core.domain_types import (
    DataKey, EnvelopeStatus, FailureMessage, Outcome, HTTP_STATUS_BY_OUTCOME,
)


class Envelope(BaseModel):
    """Response body shared by every endpoint."""
    status: EnvelopeStatus
    message: str | None = None
    data: dict[str, Any] | None = None

    def to_response(self) -> dict:
        return self.model_dump(mode="json", exclude_none=True)


@dataclass(frozen=True)
class HandlerResult:
    """What a handler produced: an outcome plus the envelope to send."""
    outcome: Outcome
    envelope: Envelope

    @property
    def http_status(self) -> int:
        return HTTP_STATUS_BY_OUTCOME[self.outcome]


def succeed(key: DataKey, payload: BaseModel | list[BaseModel]) -> HandlerResult:
    """Build a success result with payload under data[key]."""
    if isinstance(payload, list):
        dumped: Any = [item.model_dump(mode="json") for item in payload]
    else:
        dumped = payload.model_dump(mode="json")
    return HandlerResult(
        Outcome.SUCCESS,
        Envelope(status=EnvelopeStatus.SUCCESS, data={key.value: dumped}),
    )


def fail(outcome: Outcome, message: FailureMessage) -> HandlerResult:
    """Build a failure result. outcome decides the HTTP status."""
    if outcome is Outcome.SUCCESS:
        raise ValueError("fail() requires a failure outcome")
    return HandlerResult(
        outcome,
        Envelope(status=EnvelopeStatus.FAIL, message=message.value),
    )
