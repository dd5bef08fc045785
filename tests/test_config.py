"""Tests for environment-driven settings."""

from migration_gate.config import DEFAULT_CORS_ORIGINS, GateSettings


def test_defaults_from_empty_environment():
    settings = GateSettings.from_env({})
    assert settings.log_level == "INFO"
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert settings.api_prefix == "/api"


def test_overrides_from_environment():
    settings = GateSettings.from_env({
        "MIGRATION_GATE_LOG_LEVEL": "debug",
        "MIGRATION_GATE_CORS_ORIGINS": "https://admin.example.com, https://ops.example.com,",
        "MIGRATION_GATE_API_PREFIX": "/internal/",
    })
    assert settings.to_dict() == {
        "log_level": "DEBUG",
        "cors_origins": ["https://admin.example.com", "https://ops.example.com"],
        "api_prefix": "/internal",
    }


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("MIGRATION_GATE_LOG_LEVEL", "warning")
    assert GateSettings.from_env().log_level == "WARNING"
