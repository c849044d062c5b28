import pytest

from hhdocs.uploader.settings import SETTINGS, Settings


class TestSettings:
    """Test cases for Settings configuration."""

    def test_default_settings(self, default_settings: Settings) -> None:
        """Test that default settings are properly initialized."""
        assert default_settings.github_api_url == "https://api.github.com"
        assert default_settings.github_api_version == "2022-11-28"
        assert default_settings.default_owner == "kannwism"
        assert default_settings.default_repo == "hh-docs"
        assert default_settings.default_base_branch == "main"
        assert default_settings.default_commit_message == "Add files via edge function"
        assert default_settings.docs_prefix == "docs/"
        assert default_settings.mkdocs_path == "mkdocs.yml"
        assert default_settings.default_site_name == "Documentation"
        assert default_settings.port == 8000

    def test_env_prefix_configuration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables with HHDOCS_UPLOADER_ prefix are loaded."""
        monkeypatch.setenv("HHDOCS_UPLOADER_GITHUB_API_URL", "https://ghe.example.com/api/v3")
        monkeypatch.setenv("HHDOCS_UPLOADER_DEFAULT_OWNER", "someone")
        monkeypatch.setenv("HHDOCS_UPLOADER_DEFAULT_REPO", "handbook")
        monkeypatch.setenv("HHDOCS_UPLOADER_MKDOCS_PATH", "site/mkdocs.yml")
        monkeypatch.setenv("HHDOCS_UPLOADER_PORT", "9000")

        settings = Settings()

        assert settings.github_api_url == "https://ghe.example.com/api/v3"
        assert settings.default_owner == "someone"
        assert settings.default_repo == "handbook"
        assert settings.mkdocs_path == "site/mkdocs.yml"
        assert settings.port == 9000

    def test_validate_assignment(self) -> None:
        """Test that assigned values are validated."""
        with pytest.raises(ValueError):
            SETTINGS.port = "not a port"  # type: ignore[assignment]

    def test_override(self, override_setting) -> None:
        override_setting("default_owner", "someone")
        assert SETTINGS.default_owner == "someone"
