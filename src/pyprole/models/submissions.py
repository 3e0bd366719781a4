"""Contact form and newsletter signup models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

SUBSCRIBE_SUCCESS_MESSAGE = "Thanks for subscribing! Check your email for confirmation."
SUBSCRIBE_DUPLICATE_MESSAGE = "This email is already subscribed to our newsletter."
SUBSCRIBE_GENERIC_MESSAGE = "Something went wrong. Please try again."
SUBSCRIBE_NETWORK_MESSAGE = "Network error. Please check your connection and try again."
SUBSCRIBE_INVALID_MESSAGE = "Please enter a valid email address."


def _check_email(value: str) -> str:
    local, sep, domain = value.partition("@")
    if not sep or not local or "." not in domain:
        raise ValueError("email must look like name@example.com")
    return value.lower()


class ContactMessage(BaseModel):
    """A row for the ``contact_messages`` table."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    message: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        return _check_email(value)


class NewsletterSignup(BaseModel):
    """A row for the ``newsletter_signups`` table."""

    model_config = ConfigDict(frozen=True, extra="forbid", str_strip_whitespace=True)

    email: str = Field(min_length=3)

    @field_validator("email")
    @classmethod
    def _validate_email(cls, value: str) -> str:
        return _check_email(value)


class SubscribeOutcome(StrEnum):
    SUCCESS = "success"
    DUPLICATE = "duplicate"
    ERROR = "error"


class SubmissionResult(BaseModel):
    """Classified result of a form submission, with user-facing text."""

    model_config = ConfigDict(frozen=True)

    outcome: SubscribeOutcome
    message: str

    @property
    def ok(self) -> bool:
        return self.outcome is SubscribeOutcome.SUCCESS
