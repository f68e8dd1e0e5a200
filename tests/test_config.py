"""Tests for settings loading."""

from pathlib import Path

from lwdita_bridge.config import get_settings, load_settings


class TestSettings:
    """Tests for the Settings class."""

    def test_defaults(self):
        """Test the default tree vocabulary."""
        settings = get_settings()

        assert settings.source_root == "document"
        assert settings.editor_root == "doc"
        assert settings.mark_nodes == ["u", "s", "b", "sup", "sub"]
        assert settings.json_indent == 2

    def test_cached_instance(self):
        """Test that the settings instance is reused."""
        assert get_settings() is get_settings()

    def test_environment_override(self, monkeypatch):
        """Test that environment variables override defaults."""
        monkeypatch.setenv("LWDITA_LOG_LEVEL", "DEBUG")

        assert get_settings().log_level == "DEBUG"

    def test_load_from_env_file(self, tmp_path: Path):
        """Test loading settings from a specific .env file."""
        env_file = tmp_path / "custom.env"
        env_file.write_text("LWDITA_EDITOR_ROOT=root\n", encoding="utf-8")

        settings = load_settings(env_file)

        assert settings.editor_root == "root"
        assert get_settings() is settings
