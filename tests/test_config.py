"""Tests for configuration loading."""

from seolens.config import Config


class TestConfig:

    def test_defaults(self):
        config = Config()
        assert config.user_agent == "SEOLens-Analyzer/1.0"
        assert config.timeout == 30
        assert config.fetch_strategy == "direct"
        assert config.relay_url == "https://api.allorigins.win/raw?url="
        assert config.html_parser == "lxml"
        assert config.log_level == "INFO"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("USER_AGENT", "EnvBot/1.0")
        monkeypatch.setenv("TIMEOUT", "12")
        monkeypatch.setenv("FETCH_STRATEGY", "relay")
        monkeypatch.setenv("RELAY_URL", "https://relay.test/?u=")
        monkeypatch.setenv("HTML_PARSER", "html.parser")
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")

        config = Config.from_env()

        assert config.user_agent == "EnvBot/1.0"
        assert config.timeout == 12
        assert config.fetch_strategy == "relay"
        assert config.relay_url == "https://relay.test/?u="
        assert config.html_parser == "html.parser"
        assert config.log_level == "DEBUG"

    def test_invalid_timeout_keeps_default(self, monkeypatch):
        monkeypatch.setenv("TIMEOUT", "soon")
        assert Config.from_env().timeout == 30

    def test_to_dict(self):
        data = Config(timeout=3).to_dict()
        assert data["timeout"] == 3
        assert set(data) == {
            "user_agent", "timeout", "fetch_strategy", "relay_url", "html_parser", "log_level",
        }
