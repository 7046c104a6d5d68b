"""User and identity data models."""

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Stored role of a user."""

    ADMIN = "admin"
    USER = "user"


class Identity(BaseModel):
    """A signed-in identity as reported by the auth provider."""

    model_config = ConfigDict(frozen=True)

    uid: str
    email: str
    display_name: str | None = None


class UserRecord(BaseModel):
    """A user's stored profile and role."""

    uid: str
    email: str
    role: Role = Role.USER
    display_name: str | None = None
    profile_image: str | None = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    last_login: datetime | None = None

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN
