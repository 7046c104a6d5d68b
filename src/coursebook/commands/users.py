# src/coursebook/commands/users.py
"""User commands - list users and change roles."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Any

from coursebook.commands.base import RoleResult, UserInfo, UserListResult
from coursebook.config import get_stores, load_config, local_data_missing
from coursebook.directory import UserDirectory
from coursebook.errors import CoursebookError


def _directory(data_dir: str | None, config: dict[str, Any]) -> UserDirectory:
    return UserDirectory(get_stores(data_dir, config)["user_store"])


def list_users(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> UserListResult:
    """List users in sign-up order."""
    config = load_config(config_path)
    if local_data_missing(data_dir, config):
        return UserListResult(success=True)

    try:
        directory = _directory(data_dir, config)
        users = directory.list_users()
    except (sqlite3.Error, OSError, CoursebookError) as e:
        return UserListResult(success=False, error=f"Failed to access database: {e}")

    return UserListResult(
        success=True,
        users=[
            UserInfo(
                uid=user.uid,
                email=user.email,
                role=user.role.value,
                display_name=user.display_name,
                last_login=user.last_login.isoformat() if user.last_login else None,
            )
            for user in users
        ],
    )


def set_role(
    uid: str,
    role: str,
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> RoleResult:
    """Change a user's role.

    Demoting the last admin is refused.
    """
    try:
        directory = _directory(data_dir, load_config(config_path))
        user = directory.set_role(uid, role.lower())
    except ValueError:
        return RoleResult(success=False, uid=uid, error=f"Unknown role '{role}' (choose: admin, user)")
    except (sqlite3.Error, OSError, CoursebookError) as e:
        return RoleResult(success=False, uid=uid, error=str(e))

    return RoleResult(success=True, uid=user.uid, role=user.role.value)
