"""User Handlers — the five CRUD operations as parse → store → envelope pipelines.

Invariants:
    - Input is fully parsed before the store is touched
    - PUT checks the identifier before the body
    - Exactly one awaited repository call per handler, no retries
    - Any exception from that call becomes STORE_FAILURE with the endpoint's
      generic message; not-found and connectivity errors look identical to clients
    - Never raise: every path returns a HandlerResult

Design Decisions:
    - Plain async functions with the repository passed in: routes stay thin and
      tests can swap in fakes without patching
    - Store failures logged here (one place), not in the repository
"""

import logging

from users_api.core.domain_types import DataKey, FailureMessage, Outcome, UserId
from users_api.core.envelope import HandlerResult, fail, succeed
from users_api.core.errors import ErrorSeverity, UsersApiError
from users_api.core.parsing import (
    Invalid, parse_identifier, parse_user_create, parse_user_replace,
)
from users_api.core.repository_protocols import UserRepository

logger = logging.getLogger(__name__)

_INVALID_IDENTIFIER = fail(
    Outcome.INVALID_IDENTIFIER, FailureMessage.INVALID_IDENTIFIER,
)
_INVALID_INPUT = fail(Outcome.INVALID_INPUT, FailureMessage.INVALID_INPUT)

_LOG_LEVEL_BY_SEVERITY = {
    ErrorSeverity.INFO: logging.INFO,
    ErrorSeverity.WARNING: logging.WARNING,
    ErrorSeverity.ERROR: logging.ERROR,
    ErrorSeverity.CRITICAL: logging.CRITICAL,
}


def _log_store_failure(
    operation: str, exc: Exception, user_id: UserId | None = None,
) -> None:
    if isinstance(exc, UsersApiError):
        level = _LOG_LEVEL_BY_SEVERITY[exc.severity]
        logger.log(
            level, f"User {operation} failed: {exc.message}",
            extra={**exc.log_extra(), "operation": operation},
            exc_info=exc if level >= logging.ERROR else None,
        )
    else:
        logger.error(
            f"Unexpected error during user {operation}: {exc}",
            extra={"operation": operation, "user_id": user_id},
            exc_info=exc,
        )


def _log_invalid(operation: str, what: str, parsed: Invalid) -> None:
    logger.warning(
        f"User {operation}: invalid {what}: {parsed.errors}",
        extra={"operation": operation},
    )


async def list_users(repo: UserRepository) -> HandlerResult:
    """GET / — all users in store order."""
    try:
        users = await repo.list_all()
    except Exception as e:
        _log_store_failure("list", e)
        return fail(Outcome.STORE_FAILURE, FailureMessage.LIST_FAILED)
    return succeed(DataKey.USERS, users)


async def create_user(repo: UserRepository, raw_body: bytes) -> HandlerResult:
    """POST / — insert a user; the store assigns the id."""
    body = parse_user_create(raw_body)
    if isinstance(body, Invalid):
        _log_invalid("create", "body", body)
        return _INVALID_INPUT

    try:
        user = await repo.create(body.value.email, body.value.name)
    except Exception as e:
        _log_store_failure("create", e)
        return fail(Outcome.STORE_FAILURE, FailureMessage.CREATE_FAILED)
    logger.info(
        f"User {user.id} created", extra={"operation": "create", "user_id": user.id},
    )
    return succeed(DataKey.USER, user)


async def get_user(repo: UserRepository, raw_id: str) -> HandlerResult:
    """GET /{id}."""
    identifier = parse_identifier(raw_id)
    if isinstance(identifier, Invalid):
        _log_invalid("get", "identifier", identifier)
        return _INVALID_IDENTIFIER

    try:
        user = await repo.get(identifier.value)
    except Exception as e:
        _log_store_failure("get", e, identifier.value)
        return fail(Outcome.STORE_FAILURE, FailureMessage.NOT_FOUND)
    return succeed(DataKey.USER, user)


async def update_user(
    repo: UserRepository, raw_id: str, raw_body: bytes,
) -> HandlerResult:
    """PUT /{id} — replace email and name on an existing user."""
    identifier = parse_identifier(raw_id)
    if isinstance(identifier, Invalid):
        _log_invalid("update", "identifier", identifier)
        return _INVALID_IDENTIFIER

    body = parse_user_replace(raw_body)
    if isinstance(body, Invalid):
        _log_invalid("update", "body", body)
        return _INVALID_INPUT

    try:
        user = await repo.update(
            identifier.value, body.value.email, body.value.name,
        )
    except Exception as e:
        _log_store_failure("update", e, identifier.value)
        return fail(Outcome.STORE_FAILURE, FailureMessage.UPDATE_FAILED)
    logger.info(
        f"User {user.id} updated", extra={"operation": "update", "user_id": user.id},
    )
    return succeed(DataKey.USER, user)


async def delete_user(repo: UserRepository, raw_id: str) -> HandlerResult:
    """DELETE /{id} — responds with the removed user's last values."""
    identifier = parse_identifier(raw_id)
    if isinstance(identifier, Invalid):
        _log_invalid("delete", "identifier", identifier)
        return _INVALID_IDENTIFIER

    try:
        user = await repo.delete(identifier.value)
    except Exception as e:
        _log_store_failure("delete", e, identifier.value)
        return fail(Outcome.STORE_FAILURE, FailureMessage.DELETE_FAILED)
    logger.info(
        f"User {user.id} deleted", extra={"operation": "delete", "user_id": user.id},
    )
    return succeed(DataKey.USER, user)
