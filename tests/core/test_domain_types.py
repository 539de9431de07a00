"""Domain Types — verifies enum values that form the public contract."""

from users_api.core.domain_types import (
    DataKey, EnvelopeStatus, FailureMessage, HTTP_STATUS_BY_OUTCOME, Outcome, UserId,
)


def test_user_id_wraps_int():
    assert UserId(5) == 5


def test_envelope_status_values():
    assert {s.value for s in EnvelopeStatus} == {"success", "fail"}


def test_failure_messages_are_exact():
    assert FailureMessage.INVALID_IDENTIFIER.value == "no identifier found"
    assert FailureMessage.INVALID_INPUT.value == "input validation failed"
    assert FailureMessage.LIST_FAILED.value == "unable to get all users"
    assert FailureMessage.CREATE_FAILED.value == "unable to create user"
    assert FailureMessage.NOT_FOUND.value == "user not found"
    assert FailureMessage.UPDATE_FAILED.value == "unable to update user"
    assert FailureMessage.DELETE_FAILED.value == "unable to delete user"


def test_every_outcome_has_an_http_status():
    assert set(HTTP_STATUS_BY_OUTCOME) == set(Outcome)


def test_data_keys():
    assert DataKey.USERS.value == "users"
    assert DataKey.USER.value == "user"
