"""Tests covering the application settings schema and environment presets."""

from error_taxonomy.config.settings import (
    ENVIRONMENT_DEFAULTS,
    AppSettings,
    Environment,
    get_settings,
    load_settings,
)


def test_environment_defaults_provide_expected_overrides() -> None:
    """Environment presets should include reporting and sentry overrides."""
    staging_defaults = ENVIRONMENT_DEFAULTS[Environment.STAGING]
    assert staging_defaults["reporting"]["threshold"] == "warning"
    assert staging_defaults["observability"]["sentry"]["traces_sample_rate"] == 0.25

    prod_defaults = ENVIRONMENT_DEFAULTS[Environment.PROD]
    assert prod_defaults["reporting"]["threshold"] == "error"


def test_environment_enum_covers_supported_values() -> None:
    """`Environment` enum should expose the supported deployment tiers."""
    assert {env.value for env in Environment} == {"dev", "staging", "prod"}


def test_defaults_disable_sentry() -> None:
    settings = AppSettings()
    assert settings.observability.sentry.dsn is None
    assert settings.errors.id_prefix == "ERR"
    assert settings.reporting.threshold == "error"


def test_load_settings_applies_environment_preset() -> None:
    settings = load_settings("staging")
    assert settings.environment is Environment.STAGING
    assert settings.reporting.threshold == "warning"
    assert settings.reporting.background is True


def test_explicit_environment_variables_win_over_presets(monkeypatch) -> None:
    monkeypatch.setenv("ET_REPORTING__THRESHOLD", "fatal")
    monkeypatch.setenv("ET_OBSERVABILITY__SENTRY__DSN", "https://public@example.ingest.sentry.io/1")
    settings = load_settings("staging")
    assert settings.reporting.threshold == "fatal"
    assert settings.observability.sentry.dsn == "https://public@example.ingest.sentry.io/1"
    assert settings.observability.sentry.traces_sample_rate == 0.25


def test_get_settings_reads_env_selector(monkeypatch) -> None:
    monkeypatch.setenv("ET_ENV", "prod")
    get_settings.cache_clear()
    assert get_settings().environment is Environment.PROD
