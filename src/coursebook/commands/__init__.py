# src/coursebook/commands/__init__.py
"""UI-agnostic command layer for Coursebook.

Command functions return result dataclasses so that any front end can
render them.

Usage:
    from coursebook.commands import chapters, classify, status

    result = classify.classify("SELECT * FROM users")
    result.language  # "sql"

    chapters.seed_chapters(data_dir="./coursebook_data")
    status.status(data_dir="./coursebook_data").total_chapters  # 6
"""

from coursebook.commands import chapters, classify, config_cmd, init, status, users
from coursebook.commands.base import (
    ChapterInfo,
    ChapterListResult,
    ChapterResult,
    ClassifyResult,
    CleanupResult,
    CommandResult,
    ConfigResult,
    ConfirmCallback,
    ConfirmRequest,
    InitResult,
    RoleResult,
    SeedResult,
    SettingInfo,
    StatusResult,
    UserInfo,
    UserListResult,
)

__all__ = [
    # Base types
    "ConfirmRequest",
    "ConfirmCallback",
    "CommandResult",
    # Result types
    "ClassifyResult",
    "ChapterInfo",
    "ChapterListResult",
    "ChapterResult",
    "SeedResult",
    "CleanupResult",
    "UserInfo",
    "UserListResult",
    "RoleResult",
    "StatusResult",
    "ConfigResult",
    "SettingInfo",
    "InitResult",
    # Command modules
    "chapters",
    "classify",
    "users",
    "status",
    "config_cmd",
    "init",
]
