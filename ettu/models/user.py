"""User accounts, sessions and authentication payloads."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID


class UserType(str, Enum):
    """How an account came to exist."""

    GUEST = "guest"
    REGISTERED = "registered"
    MIGRATED = "migrated"

    def __str__(self) -> str:
        return self.value


class UserRole(str, Enum):
    """Permission level of an account."""

    USER = "user"
    REVIEWER = "reviewer"
    MODERATOR = "moderator"
    ADMIN = "admin"
    RESTRICTED = "restricted"

    def __str__(self) -> str:
        return self.value


@dataclass(kw_only=True)
class UserResponse:
    """Public view of a user, without credentials or settings."""

    id: UUID
    user_type: UserType
    role: UserRole
    is_active: bool
    is_verified: bool
    created_at: datetime
    updated_at: datetime
    email: str | None = None
    username: str | None = None
    display_name: str | None = None
    profile_picture: str | None = None
    bio: str | None = None
    location: str | None = None
    website: str | None = None
    theme: str | None = None
    language: str | None = None
    timezone: str | None = None
    last_login: datetime | None = None


@dataclass(kw_only=True)
class User:
    """A stored user row; ``user_type`` and ``role`` are kept as raw text."""

    id: UUID
    user_type: str
    role: str
    is_active: bool
    is_verified: bool
    created_at: datetime
    updated_at: datetime
    email: str | None = None
    username: str | None = None
    display_name: str | None = None
    password_hash: str | None = None
    profile_picture: str | None = None
    bio: str | None = None
    location: str | None = None
    website: str | None = None
    theme: str | None = None
    language: str | None = None
    timezone: str | None = None
    settings: Any = None
    last_login: datetime | None = None

    def parsed_user_type(self) -> UserType:
        """The account type; unknown text counts as a guest."""
        try:
            return UserType(self.user_type)
        except ValueError:
            return UserType.GUEST

    def parsed_role(self) -> UserRole:
        """The role; unknown text counts as a plain user."""
        try:
            return UserRole(self.role)
        except ValueError:
            return UserRole.USER

    def is_guest(self) -> bool:
        return self.parsed_user_type() is UserType.GUEST

    def is_registered(self) -> bool:
        return self.parsed_user_type() in (UserType.REGISTERED, UserType.MIGRATED)

    def can_login(self) -> bool:
        """True for registered accounts that have a password hash."""
        return self.is_registered() and self.password_hash is not None

    def into_response(self) -> UserResponse:
        return UserResponse(
            id=self.id,
            email=self.email,
            username=self.username,
            display_name=self.display_name,
            user_type=self.parsed_user_type(),
            role=self.parsed_role(),
            is_active=self.is_active,
            is_verified=self.is_verified,
            profile_picture=self.profile_picture,
            bio=self.bio,
            location=self.location,
            website=self.website,
            theme=self.theme,
            language=self.language,
            timezone=self.timezone,
            last_login=self.last_login,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


@dataclass(kw_only=True)
class CreateUserRequest:
    user_type: UserType
    email: str | None = None
    username: str | None = None
    display_name: str | None = None
    password: str | None = None


@dataclass(kw_only=True)
class UpdateUserRequest:
    email: str | None = None
    username: str | None = None
    display_name: str | None = None
    profile_picture: str | None = None
    bio: str | None = None
    location: str | None = None
    website: str | None = None
    theme: str | None = None
    language: str | None = None
    timezone: str | None = None
    settings: Any = None


@dataclass(kw_only=True)
class UserSession:
    id: UUID
    user_id: UUID
    token: str
    refresh_token: str
    expires_at: datetime
    created_at: datetime
    last_used: datetime
    is_active: bool
    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(kw_only=True)
class LoginRequest:
    password: str
    email: str | None = None
    username: str | None = None


@dataclass(kw_only=True)
class LoginResponse:
    user: UserResponse
    token: str
    refresh_token: str
    expires_at: datetime


@dataclass(kw_only=True)
class RegisterRequest:
    email: str
    username: str
    display_name: str
    password: str


@dataclass(kw_only=True)
class GuestToUserMigrationRequest:
    guest_id: UUID
    email: str
    username: str
    display_name: str
    password: str