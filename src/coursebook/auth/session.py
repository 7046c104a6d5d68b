# src/coursebook/auth/session.py
"""Explicit sign-in sessions.

There is no process-wide "current user". A ``Session`` is created by
``SessionManager.sign_in``, passed to whatever needs it, and replaced by an
inactive copy on ``sign_out``.
"""

from __future__ import annotations

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

from coursebook.auth.base import AuthProvider
from coursebook.directory import UserDirectory
from coursebook.errors import PermissionDeniedError
from coursebook.logging import get_logger
from coursebook.models import Identity, Role

logger = get_logger(__name__)


class Session(BaseModel):
    """A signed-in identity and the role it held at sign-in."""

    model_config = ConfigDict(frozen=True)

    identity: Identity
    role: Role
    started_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
    ended_at: datetime | None = None

    @property
    def active(self) -> bool:
        return self.ended_at is None

    @property
    def uid(self) -> str:
        return self.identity.uid

    @property
    def is_admin(self) -> bool:
        return self.active and self.role is Role.ADMIN


class SessionManager:
    """Owns the sign-in and sign-out lifecycle."""

    def __init__(self, provider: AuthProvider, directory: UserDirectory) -> None:
        self.provider = provider
        self.directory = directory

    def sign_in(self, credential: str) -> Session:
        """Verify a credential and open a session.

        The user record is created on first sign-in and its last-login time
        is refreshed on every sign-in.

        Raises:
            AuthenticationError: If the provider rejects the credential.
        """
        identity = self.provider.verify(credential)
        user = self.directory.ensure_user(identity)
        self.directory.record_login(user.uid)
        logger.info("Signed in %s as %s", identity.email, user.role.value)
        return Session(identity=identity, role=user.role)

    def sign_out(self, session: Session) -> Session:
        """Return the ended copy of ``session``."""
        if not session.active:
            return session
        logger.info("Signed out %s", session.identity.email)
        return session.model_copy(update={"ended_at": datetime.now(UTC)})

    def refresh(self, session: Session) -> Session:
        """Re-read the stored role, e.g. after an admin changed it."""
        if not session.active:
            return session
        user = self.directory.get_user(session.uid)
        if user is None or user.role is session.role:
            return session
        return session.model_copy(update={"role": user.role})

    @staticmethod
    def require_admin(session: Session) -> None:
        """Raise unless ``session`` is active and holds the admin role."""
        if not session.active:
            raise PermissionDeniedError("Session has ended")
        if session.role is not Role.ADMIN:
            raise PermissionDeniedError("Admin role required")
