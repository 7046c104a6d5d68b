# src/coursebook/commands/base.py
"""Base types for the commands layer.

This module defines the data structures used by all commands:
- Confirm callbacks for destructive commands (delete, init overwrite)
- Result types for each command
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class ConfirmRequest:
    """Request for a yes/no confirmation before a destructive step.

    Attributes:
        message: The question to display to the user
        details: Optional explanation of what will happen
    """

    message: str
    details: str | None = None


# Callback type for confirmations - returns True to proceed
ConfirmCallback = Callable[[ConfirmRequest], bool]


@dataclass
class CommandResult:
    """Base result type for commands."""

    success: bool
    error: str | None = None


@dataclass
class ClassifyResult(CommandResult):
    """Result of the classify command.

    Attributes:
        is_code: Whether the text should be shown as code
        language: Highlighting language (meaningful only when is_code)
        score: Weighted evidence score
        threshold: Threshold the score was compared against
        categories: Code pattern categories that matched
        signals: Structural signals and whether each was present
    """

    is_code: bool = False
    language: str = ""
    score: float = 0.0
    threshold: float = 0.0
    categories: list[str] = field(default_factory=list)
    signals: dict[str, bool] = field(default_factory=dict)


@dataclass
class ChapterInfo:
    """Summary of one chapter."""

    id: str
    title: str
    order: int
    description: str = ""
    tutorials: int = 0
    practice_sections: int = 0
    exam_sections: int = 0


@dataclass
class ChapterListResult(CommandResult):
    """Result of the chapters list command."""

    chapters: list[ChapterInfo] = field(default_factory=list)


@dataclass
class ChapterResult(CommandResult):
    """Result of a command that creates or deletes a single chapter."""

    chapter: ChapterInfo | None = None


@dataclass
class SeedResult(CommandResult):
    """Result of seeding the default chapters.

    Attributes:
        created: Titles of chapters created
        skipped: Number of default chapters that already existed
    """

    created: list[str] = field(default_factory=list)
    skipped: int = 0


@dataclass
class CleanupResult(CommandResult):
    """Result of removing duplicate chapters."""

    deleted: int = 0


@dataclass
class UserInfo:
    """Summary of one user."""

    uid: str
    email: str
    role: str
    display_name: str | None = None
    last_login: str | None = None


@dataclass
class UserListResult(CommandResult):
    """Result of the users list command."""

    users: list[UserInfo] = field(default_factory=list)


@dataclass
class RoleResult(CommandResult):
    """Result of changing a user's role."""

    uid: str = ""
    role: str = ""


@dataclass
class StatusResult(CommandResult):
    """Result of the status command."""

    total_chapters: int = 0
    total_tutorials: int = 0
    total_practice_sections: int = 0
    total_exam_sections: int = 0
    total_users: int = 0
    total_admins: int = 0


@dataclass
class SettingInfo:
    """Information about a single setting."""

    name: str
    value: str
    source: str  # "env var", "yaml", "default"


@dataclass
class ConfigResult(CommandResult):
    """Result of the config command.

    Attributes:
        backend: Storage backend (local, firebase)
        data_dir: Data directory path (local backend)
        settings: List of behavioral settings with sources
        config_path: Path to config file (if found)
    """

    backend: str = "local"
    data_dir: str = ""
    settings: list[SettingInfo] = field(default_factory=list)
    config_path: str | None = None


@dataclass
class InitResult(CommandResult):
    """Result of the init command."""

    config_path: str = ""
    backend: str = "local"
