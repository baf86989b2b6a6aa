"""Unit tests for config.py"""

import pytest

from briefmail.config import Settings, load_config


def test_load_config_defaults():
    """Settings defaults apply when no config.yaml, env var, or CLI override exists."""
    settings = load_config()
    assert settings == Settings()
    assert settings.newsletter_name == "DataCenterIQ"
    assert settings.smtp_port == 587
    assert settings.to_emails == []


def test_load_config_reads_config_yaml(tmp_path):
    """Values from config.yaml in the working directory are applied."""
    (tmp_path / "config.yaml").write_text("newsletter_name: GridIQ\nmax_searches: 4\n")
    settings = load_config()
    assert settings.newsletter_name == "GridIQ"
    assert settings.max_searches == 4


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """BRIEFMAIL_<FIELD> env vars take precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("smtp_port: 25\n")
    monkeypatch.setenv("BRIEFMAIL_SMTP_PORT", "465")
    settings = load_config()
    assert settings.smtp_port == 465


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var; None overrides are ignored."""
    monkeypatch.setenv("BRIEFMAIL_MODEL", "env-model")
    monkeypatch.setenv("BRIEFMAIL_MAX_SEARCHES", "5")
    settings = load_config(overrides={"model": "cli-model", "max_searches": None})
    assert settings.model == "cli-model"
    assert settings.max_searches == 5


def test_load_config_env_recipients_split(monkeypatch):
    """BRIEFMAIL_TO_EMAILS is split on commas with blanks dropped."""
    monkeypatch.setenv("BRIEFMAIL_TO_EMAILS", " a@example.com, ,b@example.com ,")
    settings = load_config()
    assert settings.to_emails == ["a@example.com", "b@example.com"]


def test_config_yaml_recipient_list(tmp_path):
    """to_emails may also be given as a YAML list."""
    (tmp_path / "config.yaml").write_text("to_emails:\n  - a@example.com\n  - ' b@example.com '\n")
    assert load_config().to_emails == ["a@example.com", "b@example.com"]


def test_log_level_is_case_insensitive(monkeypatch):
    monkeypatch.setenv("BRIEFMAIL_LOG_LEVEL", "debug")
    assert load_config().log_level == "DEBUG"


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_non_mapping_yaml(tmp_path):
    """A config.yaml that is not a mapping is rejected."""
    (tmp_path / "config.yaml").write_text("- just\n- a list\n")
    with pytest.raises(ValueError, match="expected a mapping"):
        load_config()


@pytest.mark.parametrize("name,value", [
    ("BRIEFMAIL_LOG_LEVEL",     "LOUD"),
    ("BRIEFMAIL_SMTP_PORT",     "not-a-port"),
    ("BRIEFMAIL_MAX_SEARCHES",  "0"),
])
def test_load_config_invalid_values(monkeypatch, name, value):
    """Values failing validation raise ValueError rather than pydantic's error."""
    monkeypatch.setenv(name, value)
    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config()
