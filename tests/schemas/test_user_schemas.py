"""User Schemas — field validation at the API boundary.

Invariants:
    - UserCreate requires a valid email and a string name
    - UserReplace coerces scalars to strings before validation
    - UserRead builds from ORM attributes
"""

import pytest
from pydantic import ValidationError

from users_api.models.user import User
from users_api.schemas.user import UserCreate, UserRead, UserReplace, js_number_to_str


def test_user_create_accepts_valid_email():
    body = UserCreate(email="alice@acme.io", name="Alice")
    assert body.email == "alice@acme.io"


@pytest.mark.parametrize("email", ["alice", "alice@", "@acme.io", "a b@acme.io"])
def test_user_create_rejects_malformed_email(email):
    with pytest.raises(ValidationError):
        UserCreate(email=email, name="Alice")


def test_user_create_accepts_empty_name():
    assert UserCreate(email="alice@acme.io", name="").name == ""


def test_user_replace_coerces_float():
    assert UserReplace(email="alice@acme.io", name=1.5).name == "1.5"


def test_user_replace_rejects_null_name():
    with pytest.raises(ValidationError):
        UserReplace(email="alice@acme.io", name=None)


def test_user_read_from_orm_object():
    user = User(id=3, email="alice@acme.io", name="Alice")
    assert UserRead.model_validate(user).model_dump() == {
        "id": 3, "email": "alice@acme.io", "name": "Alice",
    }


def test_user_create_keeps_email_exactly_as_sent():
    assert UserCreate(email="a@B.com", name="A").email == "a@B.com"
    assert UserCreate(email="Alice@Acme.IO", name="A").email == "Alice@Acme.IO"


@pytest.mark.parametrize("email", ["Bob <bob@b.com>", "<bob@b.com>"])
def test_user_create_rejects_display_name_form(email):
    with pytest.raises(ValidationError):
        UserCreate(email=email, name="Bob")


@pytest.mark.parametrize(
    "email", ["a@example.test", "x@host.local", "y@foo.localhost"],
)
def test_user_create_accepts_reserved_domains(email):
    assert UserCreate(email=email, name="A").email == email


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (1.0, "1"),
        (-0.0, "0"),
        (1.5, "1.5"),
        (7, "7"),
        (1e21, "1e+21"),
        (1.5e-7, "1.5e-7"),
        (1.5e-5, "0.000015"),
        (-2.5e-6, "-0.0000025"),
        (123456789.125, "123456789.125"),
    ],
)
def test_js_number_to_str(value, expected):
    assert js_number_to_str(value) == expected


def test_user_replace_formats_whole_float_without_fraction():
    body = UserReplace(email="alice@acme.io", name=1.0)
    assert body.name == "1"
    assert UserReplace(email="alice@acme.io", name=1e21).name == "1e+21"
