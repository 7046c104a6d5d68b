# src/coursebook/config.py
"""Configuration loading utilities for Coursebook.

This module is used by the CLI commands and by applications that want
file-based configuration. It handles:
- Finding and loading coursebook.yaml config files
- Loading .env files
- Building Settings from YAML, COURSEBOOK_* env vars and defaults
- Creating Coursebook instances and store bundles from configuration
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypedDict

if TYPE_CHECKING:
    from coursebook.configuration import StorageConfig
    from coursebook.coursebook import Coursebook
    from coursebook.settings import Settings
    from coursebook.stores import ChapterStore, UserStore

try:
    import yaml  # type: ignore[import-untyped]

    YAML_AVAILABLE = True
except ImportError:
    YAML_AVAILABLE = False

from coursebook.logging import get_logger

logger = get_logger(__name__)

# Default paths
DEFAULT_DATA_DIR = "./coursebook_data"
CONFIG_FILES = ["coursebook.yaml", "coursebook.yml", ".coursebookrc"]
ENV_FILE = ".env"

BACKENDS = ("local", "firebase")
MAX_SEARCH_DEPTH = 10


class StoreBundle(TypedDict):
    """The pair of stores a command works on."""

    chapter_store: ChapterStore
    user_store: UserStore


@dataclass
class ConfigError:
    """Error during configuration loading."""

    message: str
    suggestion: str | None = None


def load_env_file(env_path: str | Path = ENV_FILE) -> None:
    """Export ``KEY=value`` lines of a .env file; existing variables win."""
    path = Path(env_path)
    if not path.is_file():
        return

    for raw in path.read_text(encoding="utf-8").splitlines():
        entry = raw.strip()
        if entry.startswith("#") or "=" not in entry:
            continue
        name, _, value = entry.partition("=")
        os.environ.setdefault(name.strip(), value.strip().strip("\"'"))


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the nearest config file at or above ``start_dir`` (cwd by default).

    At most ten levels are searched.
    """
    origin = (start_dir or Path.cwd()).absolute()
    for directory in [origin, *origin.parents][:MAX_SEARCH_DEPTH]:
        for name in CONFIG_FILES:
            candidate = directory / name
            if candidate.exists():
                return candidate
    return None


VALID_ROOT_KEYS = {
    "backend",
    "data_dir",
    "firebase_credentials",
    "settings",
}

VALID_SETTINGS_KEYS = {
    "classifier",
    "classifier_profile",
    "default_language",
    "default_time_limit",
    "default_passing_score",
}


def _unknown(section: dict[str, Any], allowed: set[str]) -> str:
    return ", ".join(sorted(set(section) - allowed))


def validate_config(config: dict[str, Any], config_path: Path | None = None) -> list[str]:
    """Describe unknown keys and backends in a loaded config.

    Returns:
        One message per problem; an empty list means the config is clean.
    """
    from coursebook.settings import ClassifierWeights

    where = str(config_path) if config_path else "config"
    problems: list[str] = []

    if extra := _unknown(config, VALID_ROOT_KEYS):
        problems.append(f"Unknown config keys in {where}: {extra}")

    section = config.get("settings")
    if isinstance(section, dict):
        if extra := _unknown(section, VALID_SETTINGS_KEYS):
            problems.append(f"Unknown settings keys: {extra}")
        weights = section.get("classifier")
        if isinstance(weights, dict) and (extra := _unknown(weights, set(ClassifierWeights.model_fields))):
            problems.append(f"Unknown classifier weights: {extra}")

    backend = config.get("backend")
    if backend is not None and backend not in BACKENDS:
        problems.append(f"Unknown backend '{backend}' (expected one of: {', '.join(BACKENDS)})")

    return problems


def load_config(config_path: Path | str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit path to config file, or None to search

    Returns:
        Configuration dictionary (empty if no config found)
    """
    config_path = Path(config_path) if config_path is not None else find_config_file()

    if config_path is None or not config_path.exists():
        return {}

    if not YAML_AVAILABLE:
        logger.warning("PyYAML is not installed; ignoring %s", config_path)
        return {}

    with open(config_path, encoding="utf-8") as f:
        config = yaml.safe_load(f) or {}

    for warning in validate_config(config, config_path):
        logger.warning(warning)

    return config


def _safe_int(value: str | None) -> int | None:
    """Parse int from string, returning None on invalid value."""
    if value is None:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _safe_float(value: str | None) -> float | None:
    """Parse float from string, returning None on invalid value."""
    if value is None or value == "":
        return None
    try:
        return float(value)
    except ValueError:
        return None


def get_settings_from_env() -> dict[str, Any]:
    """Read behavioral settings from COURSEBOOK_* environment variables.

    Only explicitly set variables are returned so that YAML values survive
    unless overridden.
    """
    result: dict[str, Any] = {}

    if os.environ.get("COURSEBOOK_CLASSIFIER_PROFILE"):
        result["classifier_profile"] = os.environ["COURSEBOOK_CLASSIFIER_PROFILE"].lower()
    if (val := _safe_float(os.environ.get("COURSEBOOK_CLASSIFIER_THRESHOLD"))) is not None:
        result["classifier"] = {"threshold": val}
    if os.environ.get("COURSEBOOK_DEFAULT_LANGUAGE"):
        result["default_language"] = os.environ["COURSEBOOK_DEFAULT_LANGUAGE"].lower()
    if (val := _safe_int(os.environ.get("COURSEBOOK_DEFAULT_TIME_LIMIT"))) is not None:
        result["default_time_limit"] = val
    if (val := _safe_int(os.environ.get("COURSEBOOK_DEFAULT_PASSING_SCORE"))) is not None:
        result["default_passing_score"] = val

    return result


def get_settings_from_yaml(config: dict[str, Any]) -> dict[str, Any]:
    """Extract the ``settings:`` section of a YAML config."""
    yaml_settings = config.get("settings", {}) or {}
    return {key: yaml_settings[key] for key in VALID_SETTINGS_KEYS if key in yaml_settings}


def build_settings(
    config: dict[str, Any] | None = None,
    env_settings: dict[str, Any] | None = None,
) -> Settings:
    """Build Settings from YAML config and env vars.

    Precedence (highest to lowest):
    1. Environment variables
    2. YAML settings: section
    3. Classifier profile (if one is named)
    4. Settings class defaults

    Args:
        config: YAML configuration dictionary
        env_settings: Environment variable overrides (if None, reads from env)
    """
    from coursebook.settings import Settings

    config = config or {}
    yaml_settings = get_settings_from_yaml(config)
    env_settings = env_settings if env_settings is not None else get_settings_from_env()

    # Weights merge key by key rather than replacing the whole table
    classifier = {
        **(yaml_settings.get("classifier") or {}),
        **(env_settings.get("classifier") or {}),
    }
    merged = {**yaml_settings, **env_settings}
    merged.pop("classifier", None)
    profile = merged.pop("classifier_profile", None)

    if profile:
        return Settings.with_profile(profile, classifier=classifier, **merged)
    return Settings(classifier=classifier, **merged)


def resolve_data_dir(data_dir: str | None, config: dict[str, Any]) -> str:
    """Effective data directory: argument > COURSEBOOK_DATA_DIR > yaml > default."""
    return (
        data_dir
        or os.environ.get("COURSEBOOK_DATA_DIR")
        or config.get("data_dir")
        or DEFAULT_DATA_DIR
    )


def get_stores(
    data_dir: str | Path | None = None,
    config: dict[str, Any] | None = None,
) -> StoreBundle:
    """Open the stores of the configured backend for the command layer.

    Args:
        data_dir: Override data directory (local backend)
        config: Loaded YAML config; the local backend is used when empty

    Raises:
        BackendUnavailableError: If the backend is unknown or cannot be opened
    """
    from coursebook.errors import BackendUnavailableError

    storage = get_storage(config or {}, str(data_dir) if data_dir is not None else None)
    if isinstance(storage, ConfigError):
        raise BackendUnavailableError(f"{storage.message}. {storage.suggestion}")

    chapter_store, user_store = storage.build_stores()
    return {"chapter_store": chapter_store, "user_store": user_store}


def local_data_missing(data_dir: str | None, config: dict[str, Any]) -> bool:
    """True when the local backend is configured and its data directory is absent."""
    if config.get("backend", "local") != "local":
        return False
    return not os.path.exists(resolve_data_dir(data_dir, config))


def get_storage(
    config: dict[str, Any], data_dir: str | None = None
) -> StorageConfig | ConfigError:
    """Pick the storage configuration named by ``backend``."""
    from coursebook.configuration import FirebaseStorage, LocalStorage

    backend = config.get("backend", "local")
    if backend == "local":
        return LocalStorage(resolve_data_dir(data_dir, config))
    if backend == "firebase":
        credentials = config.get("firebase_credentials") or os.environ.get(
            "GOOGLE_APPLICATION_CREDENTIALS"
        )
        return FirebaseStorage(credentials_path=credentials)
    return ConfigError(
        message=f"Unknown backend '{backend}'",
        suggestion=f"Supported backends: {', '.join(BACKENDS)}",
    )


def get_coursebook(
    data_dir: str | None = None,
    config_path: str | Path | None = None,
) -> Coursebook | ConfigError:
    """Create a Coursebook from configuration.

    Args:
        data_dir: Override data directory (local backend)
        config_path: Override config file path

    Returns:
        Configured Coursebook, or ConfigError if configuration is invalid
    """
    from pydantic import ValidationError

    from coursebook.coursebook import Coursebook

    config = load_config(config_path)
    storage = get_storage(config, data_dir)
    if isinstance(storage, ConfigError):
        return storage

    try:
        settings = build_settings(config)
    except (ValidationError, ValueError) as e:
        return ConfigError(
            message=f"Invalid settings: {e}",
            suggestion="Check the settings section of coursebook.yaml and COURSEBOOK_* env vars",
        )

    return Coursebook(storage=storage, settings=settings)
