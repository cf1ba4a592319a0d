"""Unit tests for application settings configuration."""

from pathlib import Path

from pydantic_settings import SettingsConfigDict

from app.config import Settings


def test_settings_uses_backend_env_file_independent_of_cwd():
    """Settings should always include backend/.env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_backend_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_backend_env in normalized
    assert str(Path(".env")) in normalized


def test_settings_reads_backend_config_yaml():
    yaml_files = Settings.model_config.get("yaml_file")
    assert yaml_files is not None

    normalized = {str(Path(item)) for item in yaml_files}
    expected_backend_yaml = str(Path(__file__).resolve().parents[2] / "config.yaml")

    assert expected_backend_yaml in normalized


def _settings_from(yaml_path: Path) -> type[Settings]:
    class YamlOnlySettings(Settings):
        model_config = SettingsConfigDict(env_file=None, yaml_file=yaml_path)

    return YamlOnlySettings


def test_yaml_values_are_loaded(tmp_path: Path):
    config = tmp_path / "config.yaml"
    config.write_text("port: 9090\nlog_format: json\n")

    settings = _settings_from(config)()

    assert settings.port == 9090
    assert settings.log_format == "json"


def test_environment_overrides_yaml(tmp_path: Path, monkeypatch):
    config = tmp_path / "config.yaml"
    config.write_text("port: 9090\ndatabase_url: sqlite:///from-yaml.db\n")
    monkeypatch.setenv("PORT", "7070")

    settings = _settings_from(config)()

    assert settings.port == 7070
    assert settings.database_url == "sqlite:///from-yaml.db"


def test_explicit_arguments_win(tmp_path: Path, monkeypatch):
    config = tmp_path / "config.yaml"
    config.write_text("port: 9090\n")
    monkeypatch.setenv("PORT", "7070")

    settings = _settings_from(config)(port=6060)

    assert settings.port == 6060
