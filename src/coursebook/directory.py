# src/coursebook/directory.py
"""User directory: maps auth identities to stored roles."""

from __future__ import annotations

from datetime import UTC, datetime

from coursebook.errors import DuplicateUserError, LastAdminError, UserNotFoundError
from coursebook.logging import get_logger
from coursebook.models import Identity, Role, UserRecord
from coursebook.stores import UserStore

logger = get_logger(__name__)


class UserDirectory:
    """Role bookkeeping on top of a ``UserStore``.

    Two rules hold for every directory:
    - the first identity ever registered becomes an admin
    - the last admin can never be demoted

    Example:
        directory = UserDirectory(SQLiteUserStore("./data/users.db"))
        user = directory.ensure_user(Identity(uid="abc", email="a@example.com"))
        directory.is_admin(user.uid)
    """

    def __init__(self, store: UserStore) -> None:
        self.store = store

    def get_user(self, uid: str) -> UserRecord | None:
        if not uid:
            return None
        return self.store.get(uid)

    def register(self, identity: Identity) -> UserRecord:
        """Create the stored record for a new identity.

        Returns:
            The created record. Its role is admin if no user existed yet.

        Raises:
            DuplicateUserError: If ``identity.uid`` already has a record. Roles
                of existing users only change through ``set_role``.
        """
        if self.store.get(identity.uid) is not None:
            logger.error("Refusing to re-register existing user %s", identity.uid)
            raise DuplicateUserError(identity.uid)

        role = Role.ADMIN if self.store.count_users() == 0 else Role.USER
        now = datetime.now(UTC)
        user = UserRecord(
            uid=identity.uid,
            email=identity.email,
            role=role,
            display_name=identity.display_name,
            created_at=now,
            last_login=now,
        )
        self.store.put(user)
        if role is Role.ADMIN:
            logger.info("First user %s registered as admin", identity.email)
        else:
            logger.info("Registered user %s", identity.email)
        return user

    def ensure_user(self, identity: Identity) -> UserRecord:
        """Return the stored record for ``identity``, registering it if needed."""
        existing = self.store.get(identity.uid)
        if existing is not None:
            return existing
        return self.register(identity)

    def update_profile(
        self,
        uid: str,
        display_name: str | None = None,
        profile_image: str | None = None,
    ) -> UserRecord:
        """Update display name and/or profile image.

        Raises:
            ValueError: If neither field is given.
            UserNotFoundError: If no record exists for ``uid``.
        """
        if display_name is None and profile_image is None:
            raise ValueError("No updates provided")

        user = self.store.get(uid)
        if user is None:
            raise UserNotFoundError(uid)

        if display_name is not None:
            user.display_name = display_name
        if profile_image is not None:
            user.profile_image = profile_image
        self.store.put(user)
        return user

    def record_login(self, uid: str) -> None:
        """Stamp ``last_login``. Unknown uids are ignored."""
        user = self.store.get(uid)
        if user is None:
            logger.debug("Skipping last-login update for unknown uid %s", uid)
            return
        user.last_login = datetime.now(UTC)
        self.store.put(user)

    def is_admin(self, uid: str) -> bool:
        user = self.get_user(uid)
        return user is not None and user.is_admin

    def list_users(self) -> list[UserRecord]:
        return self.store.list_users()

    def set_role(self, uid: str, role: Role | str) -> UserRecord:
        """Change a user's role.

        Raises:
            UserNotFoundError: If no record exists for ``uid``.
            LastAdminError: If this would demote the only admin.
        """
        role = Role(role)
        user = self.store.get(uid)
        if user is None:
            raise UserNotFoundError(uid)

        if user.role is Role.ADMIN and role is Role.USER and self.store.count_admins() <= 1:
            logger.error("Refusing to demote last admin %s", uid)
            raise LastAdminError(uid)

        user.role = role
        self.store.put(user)
        logger.info("User role updated: %s to %s", uid, role.value)
        return user
