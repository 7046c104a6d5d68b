# src/coursebook/commands/init.py
"""Init command - write a starter coursebook.yaml.

An existing config is only replaced after the confirm callback agrees, so
each UI can ask in its own way.
"""

from __future__ import annotations

from pathlib import Path

from coursebook.commands.base import ConfirmCallback, ConfirmRequest, InitResult
from coursebook.config import BACKENDS, CONFIG_FILES, DEFAULT_DATA_DIR
from coursebook.settings import CLASSIFIER_PROFILES


class InitCancelled(Exception):
    """Raised when init is cancelled by user."""


def generate_config_content(
    backend: str = "local",
    data_dir: str = DEFAULT_DATA_DIR,
    profile: str | None = None,
    firebase_credentials: str | None = None,
) -> str:
    """Generate coursebook.yaml content.

    Args:
        backend: Storage backend ("local" or "firebase")
        data_dir: Data directory for the local backend
        profile: Optional classifier profile to pin
        firebase_credentials: Service account JSON path (firebase backend)

    Returns:
        YAML content as string
    """
    content = f"""# Coursebook Configuration
backend: {backend}
"""

    if backend == "firebase":
        if firebase_credentials:
            content += f"firebase_credentials: {firebase_credentials}\n"
        else:
            content += (
                "# Service account JSON; GOOGLE_APPLICATION_CREDENTIALS is used if unset\n"
                "# firebase_credentials: ./serviceAccount.json\n"
            )
    else:
        content += f"data_dir: {data_dir}\n"

    if profile:
        content += f"\nsettings:\n  classifier_profile: {profile}\n"

    content += """
# Uncomment to customize (showing defaults):
# settings:
#   classifier_profile: strict   # strict | lenient
#   default_language: javascript # fallback highlighting language
#   default_time_limit: 30       # exam minutes
#   default_passing_score: 70    # exam percent
#   classifier:
#     code_patterns: 0.6
#     multiline: 0.2
#     indentation: 0.1
#     braces: 0.1
#     parentheses: 0.1
#     semicolons: 0.1
#     quotes: 0.1
#     declared_code: 0.3
#     threshold: 0.3
"""
    return content


def _validate(backend: str, profile: str | None) -> str | None:
    if backend not in BACKENDS:
        return f"Unknown backend '{backend}' (choose: {', '.join(BACKENDS)})"
    if profile and profile not in CLASSIFIER_PROFILES:
        return f"Unknown profile '{profile}' (choose: {', '.join(CLASSIFIER_PROFILES)})"
    return None


def init(
    on_confirm: ConfirmCallback,
    backend: str = "local",
    data_dir: str | None = None,
    profile: str | None = None,
    firebase_credentials: str | None = None,
    config_dir: str | Path = ".",
) -> InitResult:
    """Create coursebook.yaml in ``config_dir``.

    Args:
        on_confirm: Asked before an existing config is overwritten
        backend: Storage backend
        data_dir: Data directory for the local backend
        profile: Optional classifier profile
        firebase_credentials: Service account JSON path
        config_dir: Directory to create config in

    Returns:
        InitResult with the path of the written file

    Raises:
        InitCancelled: If the user declines to overwrite
    """
    error = _validate(backend, profile)
    if error:
        return InitResult(success=False, error=error)

    config_path = Path(config_dir) / CONFIG_FILES[0]
    if config_path.exists():
        confirmed = on_confirm(
            ConfirmRequest(
                message="Config file already exists. Overwrite?",
                details=str(config_path),
            )
        )
        if not confirmed:
            raise InitCancelled()

    content = generate_config_content(
        backend=backend,
        data_dir=data_dir or DEFAULT_DATA_DIR,
        profile=profile,
        firebase_credentials=firebase_credentials,
    )
    config_path.write_text(content, encoding="utf-8")

    return InitResult(success=True, config_path=str(config_path), backend=backend)


def init_non_interactive(
    backend: str = "local",
    data_dir: str | None = None,
    profile: str | None = None,
    config_dir: str | Path = ".",
    overwrite: bool = False,
) -> InitResult:
    """Create coursebook.yaml without prompting.

    Args:
        backend: Storage backend
        data_dir: Data directory for the local backend
        profile: Optional classifier profile
        config_dir: Directory to create config in
        overwrite: If True, overwrite existing config
    """
    config_path = Path(config_dir) / CONFIG_FILES[0]
    if config_path.exists() and not overwrite:
        return InitResult(
            success=False,
            error="Config file already exists. Set overwrite=True to replace.",
        )

    return init(
        on_confirm=lambda _request: True,
        backend=backend,
        data_dir=data_dir,
        profile=profile,
        config_dir=config_dir,
    )
