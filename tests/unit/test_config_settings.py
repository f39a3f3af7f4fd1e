"""Unit tests for application settings configuration."""

from pathlib import Path

from case_library.config import Settings


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-root .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_blank_store_endpoint_selects_fallback_store():
    settings = Settings(store_endpoint_url="   ")
    assert settings.uses_remote_store is False


def test_configured_store_endpoint_selects_remote_store():
    settings = Settings(store_endpoint_url="https://store.example.com/exec")
    assert settings.uses_remote_store is True
