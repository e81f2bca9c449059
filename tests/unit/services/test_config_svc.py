"""Unit tests for ConfigService."""

from pathlib import Path

import pytest

from architector.services.config_svc import DEFAULT_PROJECT_ID, ConfigService


class TestConfigService:
    """Tests for configuration composition."""

    @pytest.mark.unit
    def test_defaults(self, tmp_path: Path) -> None:
        config = ConfigService(overrides={"base_dir": str(tmp_path)}, environ={})
        assert config.get("log_level") == "WARNING"
        assert config.default_project_id() == DEFAULT_PROJECT_ID
        assert config.storage_paths().base_dir == tmp_path

    @pytest.mark.unit
    def test_default_base_dir_is_under_home(self) -> None:
        config = ConfigService(environ={"HOME": str(Path.home())})
        assert config.storage_paths().base_dir == Path.home() / ".mcp-architector"

    @pytest.mark.unit
    def test_env_overrides(self, tmp_path: Path) -> None:
        config = ConfigService(
            environ={
                "ARCHITECTOR_BASE_DIR": str(tmp_path / "env-root"),
                "MCP_PROJECT_ID": "/work/app",
                "ARCHITECTOR_LOG_LEVEL": "DEBUG",
            }
        )
        assert config.storage_paths().base_dir == tmp_path / "env-root"
        assert config.default_project_id() == "/work/app"
        assert config.get("log_level") == "DEBUG"

    @pytest.mark.unit
    def test_overrides_win_over_env(self, tmp_path: Path) -> None:
        config = ConfigService(
            overrides={"base_dir": str(tmp_path / "override")},
            environ={"ARCHITECTOR_BASE_DIR": str(tmp_path / "env-root")},
        )
        assert config.storage_paths().base_dir == tmp_path / "override"

    @pytest.mark.unit
    def test_yaml_in_base_dir(self, tmp_path: Path) -> None:
        (tmp_path / "config.yaml").write_text("log_level: INFO\ndefault_project_id: shared\n", encoding="utf-8")
        config = ConfigService(overrides={"base_dir": str(tmp_path)}, environ={})
        assert config.get("log_level") == "INFO"
        assert config.default_project_id() == "shared"

    @pytest.mark.unit
    def test_yaml_from_env_path_is_overridden_by_env(self, tmp_path: Path) -> None:
        cfg_file = tmp_path / "custom.yaml"
        cfg_file.write_text("log_level: INFO\nproject_id: from-yaml\n", encoding="utf-8")
        config = ConfigService(
            environ={"ARCHITECTOR_CONFIG": str(cfg_file), "MCP_PROJECT_ID": "from-env"},
        )
        assert config.get("log_level") == "INFO"
        assert config.default_project_id() == "from-env"

    @pytest.mark.unit
    def test_invalid_yaml_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "config.yaml").write_text("log_level: [unclosed\n", encoding="utf-8")
        config = ConfigService(overrides={"base_dir": str(tmp_path)}, environ={})
        assert config.get("log_level") == "WARNING"

    @pytest.mark.unit
    def test_non_mapping_yaml_is_ignored(self, tmp_path: Path) -> None:
        (tmp_path / "config.yaml").write_text("- just\n- a list\n", encoding="utf-8")
        config = ConfigService(overrides={"base_dir": str(tmp_path)}, environ={})
        assert config.get("log_level") == "WARNING"

    @pytest.mark.unit
    def test_config_is_cached_until_reload(self, tmp_path: Path) -> None:
        config = ConfigService(overrides={"base_dir": str(tmp_path)}, environ={})
        assert config.get("log_level") == "WARNING"

        (tmp_path / "config.yaml").write_text("log_level: ERROR\n", encoding="utf-8")
        assert config.get("log_level") == "WARNING"
        config.reload()
        assert config.get("log_level") == "ERROR"

    @pytest.mark.unit
    def test_get_default_for_missing_key(self, tmp_path: Path) -> None:
        config = ConfigService(overrides={"base_dir": str(tmp_path)}, environ={})
        assert config.get("no_such_key", 42) == 42
