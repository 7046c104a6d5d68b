# tests/commands/test_init.py
"""Tests for the init command."""

from __future__ import annotations

from pathlib import Path

import pytest

from coursebook.commands import init as init_cmd
from coursebook.commands.base import ConfirmRequest


class TestGenerateConfigContent:
    """Tests for generate_config_content()."""

    def test_local_backend(self) -> None:
        content = init_cmd.generate_config_content(backend="local", data_dir="./data")

        assert "backend: local" in content
        assert "data_dir: ./data" in content
        assert "firebase_credentials" not in content.split("# Uncomment")[0]

    def test_firebase_backend_with_credentials(self) -> None:
        content = init_cmd.generate_config_content(
            backend="firebase", firebase_credentials="./sa.json"
        )

        assert "backend: firebase" in content
        assert "firebase_credentials: ./sa.json" in content
        assert "data_dir:" not in content.split("# Uncomment")[0]

    def test_firebase_backend_without_credentials(self) -> None:
        content = init_cmd.generate_config_content(backend="firebase")
        assert "# firebase_credentials:" in content

    def test_profile_is_pinned(self) -> None:
        content = init_cmd.generate_config_content(profile="strict")
        assert "classifier_profile: strict" in content.split("# Uncomment")[0]

    def test_parses_as_yaml(self) -> None:
        yaml = pytest.importorskip("yaml")
        content = init_cmd.generate_config_content(data_dir="./data", profile="lenient")

        config = yaml.safe_load(content)
        assert config["backend"] == "local"
        assert config["settings"]["classifier_profile"] == "lenient"


class TestInit:
    """Tests for init() and init_non_interactive()."""

    def test_writes_config(self, temp_dir) -> None:
        result = init_cmd.init(on_confirm=lambda _r: True, data_dir="./data", config_dir=temp_dir)

        assert result.success is True
        assert result.backend == "local"
        assert Path(result.config_path).name == "coursebook.yaml"
        assert "data_dir: ./data" in Path(result.config_path).read_text(encoding="utf-8")

    def test_unknown_backend(self, temp_dir) -> None:
        result = init_cmd.init(on_confirm=lambda _r: True, backend="mongo", config_dir=temp_dir)

        assert result.success is False
        assert "mongo" in result.error

    def test_unknown_profile(self, temp_dir) -> None:
        result = init_cmd.init(on_confirm=lambda _r: True, profile="loose", config_dir=temp_dir)

        assert result.success is False
        assert "loose" in result.error

    def test_overwrite_asks(self, temp_dir) -> None:
        (Path(temp_dir) / "coursebook.yaml").write_text("backend: local\n", encoding="utf-8")
        requests: list[ConfirmRequest] = []

        def confirm(request: ConfirmRequest) -> bool:
            requests.append(request)
            return True

        result = init_cmd.init(on_confirm=confirm, profile="strict", config_dir=temp_dir)
        assert result.success is True
        assert "Overwrite" in requests[0].message

    def test_overwrite_declined(self, temp_dir) -> None:
        path = Path(temp_dir) / "coursebook.yaml"
        path.write_text("backend: local\n", encoding="utf-8")

        with pytest.raises(init_cmd.InitCancelled):
            init_cmd.init(on_confirm=lambda _r: False, config_dir=temp_dir)
        assert path.read_text(encoding="utf-8") == "backend: local\n"

    def test_non_interactive_refuses_overwrite(self, temp_dir) -> None:
        (Path(temp_dir) / "coursebook.yaml").write_text("backend: local\n", encoding="utf-8")

        result = init_cmd.init_non_interactive(config_dir=temp_dir)
        assert result.success is False
        assert "overwrite=True" in result.error

    def test_non_interactive_overwrite(self, temp_dir) -> None:
        (Path(temp_dir) / "coursebook.yaml").write_text("backend: local\n", encoding="utf-8")

        result = init_cmd.init_non_interactive(config_dir=temp_dir, backend="firebase", overwrite=True)
        assert result.success is True
        assert result.backend == "firebase"
