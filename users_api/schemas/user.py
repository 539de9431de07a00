"""User Schemas — Pydantic models for create/replace bodies and the public user shape.

Invariants:
    - UserCreate: email must be a syntactically valid address, name must be a JSON string
    - The email is stored exactly as sent: validated, never normalized
    - Display-name forms ("Bob <bob@b.com>") are rejected
    - Reserved domains (.test, .local, .localhost) count as syntactically valid
    - UserReplace: same fields, but number/boolean values are coerced to strings
      (JavaScript String() formatting) before validation; missing or null fields stay invalid
    - UserRead is the only user shape that leaves the service

Design Decisions:
    - email-validator over a hand-written regex; its normalized result is discarded
    - Unknown body fields are ignored, not rejected
"""

from typing import Annotated, Any

import email_validator
from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, field_validator

# Only syntax is checked; no domain is off-limits
email_validator.SPECIAL_USE_DOMAIN_NAMES.clear()


def check_email(v: str) -> str:
    """Validate v as an email address and return it unchanged."""
    if "<" in v or ">" in v:
        raise ValueError("display-name email form is not accepted")
    validate_email(v, check_deliverability=False)
    return v


Email = Annotated[str, AfterValidator(check_email)]


def js_number_to_str(v: int | float) -> str:
    """Format a JSON number the way JavaScript's String() does."""
    if isinstance(v, int):
        return str(v)
    if v.is_integer() and abs(v) < 1e21:
        return str(int(v))
    text = repr(v)
    mantissa, sep, exponent = text.partition("e")
    if not sep:
        return text
    exp = int(exponent)
    if -7 < exp < 0:
        # JS keeps plain decimals down to 1e-6
        negative = mantissa.startswith("-")
        digits = mantissa.lstrip("-").replace(".", "")
        return f"{'-' if negative else ''}0.{'0' * (-exp - 1)}{digits}"
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


class UserCreate(BaseModel):
    """Body for POST / — strict string fields."""
    email: Email
    name: str


class UserReplace(UserCreate):
    """Body for PUT /{id} — full replace of email and name."""

    @field_validator("email", "name", mode="before")
    @classmethod
    def coerce_scalars_to_str(cls, v: Any) -> Any:
        # bool before int: bool is an int subclass
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return js_number_to_str(v)
        return v


class UserRead(BaseModel):
    """Public user representation — also the store's snapshot type."""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    name: str
