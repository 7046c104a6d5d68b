# src/coursebook/commands/config_cmd.py
"""Config command - display the effective configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import ValidationError

from coursebook.commands.base import ConfigResult, SettingInfo
from coursebook.config import (
    build_settings,
    find_config_file,
    get_settings_from_env,
    get_settings_from_yaml,
    load_config,
    resolve_data_dir,
)
from coursebook.settings import ClassifierWeights


def _get_setting_source(key: str, yaml_settings: dict[str, Any], env_settings: dict[str, Any]) -> str:
    """Determine the source of a setting value."""
    if key in env_settings:
        return "env var"
    if key in yaml_settings:
        return "yaml"
    return "default"


def _get_weight_source(
    key: str, yaml_settings: dict[str, Any], env_settings: dict[str, Any]
) -> str:
    """Like ``_get_setting_source`` for one entry of the weight table."""
    if key in (env_settings.get("classifier") or {}):
        return "env var"
    if key in (yaml_settings.get("classifier") or {}):
        return "yaml"
    if "classifier_profile" in env_settings or "classifier_profile" in yaml_settings:
        return "profile"
    return "default"


def config(config_path: str | Path | None = None) -> ConfigResult:
    """Get current configuration settings.

    Args:
        config_path: Override config file path

    Returns:
        ConfigResult with all settings and their sources
    """
    cli_config = load_config(config_path)
    env_settings = get_settings_from_env()
    yaml_settings = get_settings_from_yaml(cli_config)

    try:
        settings = build_settings(cli_config, env_settings)
    except (ValidationError, ValueError) as e:
        return ConfigResult(success=False, error=f"Invalid settings: {e}")

    found_config_path = Path(config_path) if config_path else find_config_file()

    result = ConfigResult(success=True)
    result.config_path = str(found_config_path) if found_config_path else None
    result.backend = cli_config.get("backend", "local")
    result.data_dir = resolve_data_dir(None, cli_config)

    for key in ("default_language", "default_time_limit", "default_passing_score"):
        value = getattr(settings, key)
        result.settings.append(
            SettingInfo(
                name=key,
                value=str(getattr(value, "value", value)),
                source=_get_setting_source(key, yaml_settings, env_settings),
            )
        )

    for key in ClassifierWeights.model_fields:
        result.settings.append(
            SettingInfo(
                name=f"classifier.{key}",
                value=str(getattr(settings.classifier, key)),
                source=_get_weight_source(key, yaml_settings, env_settings),
            )
        )

    return result
