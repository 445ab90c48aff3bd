"""Pytest configuration and fixtures for dtokit tests."""

import pytest
from pydantic import Field, PrivateAttr

from dtokit import Dto, field_setter

# --- Sample DTOs ---


class UserDto(Dto):
    """DTO with a conventional override setter that applies a default."""

    id: int | None = None
    firstName: str | None = None
    lastName: str | None = None
    email: str | None = None
    role: str | None = None
    tags: list = Field(default_factory=list)

    _role_setter_calls: int = PrivateAttr(default=0)

    def setRole(self, value: str | None) -> None:
        self._role_setter_calls += 1
        self.role = value or "member"


class ContactDto(Dto):
    """DTO with an explicitly registered override setter."""

    email: str | None = None
    phoneNumber: str | None = None

    @field_setter("email")
    def normalize_email(self, value: str | None) -> None:
        self.email = value.strip().lower() if value else None


# --- Fixtures ---


@pytest.fixture
def user() -> UserDto:
    """Empty user DTO."""
    return UserDto()


@pytest.fixture
def contact() -> ContactDto:
    """Empty contact DTO."""
    return ContactDto()


@pytest.fixture
def user_row() -> dict:
    """Row as it would come back from a users table."""
    return {
        "id": 7,
        "first_name": "Jo",
        "last_name": "Bloggs",
        "email": "jo@example.com",
    }


@pytest.fixture
def user_cls() -> type[UserDto]:
    """User DTO class, for constructor tests."""
    return UserDto
