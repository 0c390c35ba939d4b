from __future__ import annotations

from contextlib import contextmanager

from error_taxonomy.config.settings import AppSettings
from error_taxonomy.errors import ErrInternalServerError, get_config
from error_taxonomy.observability import sentry as sentry_module
from error_taxonomy.observability.reporting import Severity


class DummyScope:
    def __init__(self) -> None:
        self.level: str | None = None
        self.extras: dict = {}
        self.tags: dict = {}

    def set_level(self, level: str) -> None:
        self.level = level

    def set_extra(self, key: str, value) -> None:  # type: ignore[no-untyped-def]
        self.extras[key] = value

    def set_tag(self, key: str, value: str) -> None:
        self.tags[key] = value


class DummySDK:
    def __init__(self) -> None:
        self.init_calls: list[dict] = []
        self.messages: list[tuple[str, str]] = []
        self.scopes: list[DummyScope] = []

    def init(self, **kwargs):  # type: ignore[no-untyped-def]
        self.init_calls.append(kwargs)

    @contextmanager
    def new_scope(self):  # type: ignore[no-untyped-def]
        scope = DummyScope()
        self.scopes.append(scope)
        yield scope

    def capture_message(self, message: str, level: str) -> None:
        self.messages.append((message, level))


def _settings(**reporting) -> AppSettings:  # type: ignore[no-untyped-def]
    settings = AppSettings()
    settings.observability.sentry.dsn = "https://public@example.ingest.sentry.io/1"
    settings.reporting.background = False
    for key, value in reporting.items():
        setattr(settings.reporting, key, value)
    return settings


def test_initialise_sentry_invokes_sdk(monkeypatch) -> None:
    monkeypatch.setattr(sentry_module, "_SENTRY_INITIALISED", False)
    sdk = DummySDK()
    monkeypatch.setattr(sentry_module, "sentry_sdk", sdk)

    settings = _settings()
    assert sentry_module.initialise_sentry(settings) is True

    assert sdk.init_calls
    assert sdk.init_calls[0]["dsn"] == "https://public@example.ingest.sentry.io/1"
    assert sdk.init_calls[0]["environment"] == settings.environment.value


def test_initialise_sentry_without_dsn_is_skipped(monkeypatch) -> None:
    monkeypatch.setattr(sentry_module, "_SENTRY_INITIALISED", False)
    sdk = DummySDK()
    monkeypatch.setattr(sentry_module, "sentry_sdk", sdk)

    assert sentry_module.initialise_sentry(AppSettings()) is False
    assert sdk.init_calls == []


def test_sentry_reporter_attaches_context(monkeypatch) -> None:
    sdk = DummySDK()
    monkeypatch.setattr(sentry_module, "sentry_sdk", sdk)

    sentry_module.SentryReporter().report(
        "db down", Severity.FATAL, {"error_code": "InternalServerError", "tenant": "acme"}
    )

    assert sdk.messages == [("db down", "fatal")]
    scope = sdk.scopes[0]
    assert scope.level == "fatal"
    assert scope.extras == {"error_code": "InternalServerError", "tenant": "acme"}
    assert scope.tags == {"error_code": "InternalServerError"}


def test_initialise_reporting_installs_sentry_adapter(monkeypatch) -> None:
    monkeypatch.setattr(sentry_module, "_SENTRY_INITIALISED", False)
    sdk = DummySDK()
    monkeypatch.setattr(sentry_module, "sentry_sdk", sdk)

    adapter = sentry_module.initialise_reporting(_settings(threshold="error"))

    assert adapter.enabled
    assert get_config().reporting is adapter
    assert ErrInternalServerError.new("Oops").set_internal("pool exhausted").report() is True
    assert sdk.messages == [("pool exhausted", "error")]


def test_initialise_reporting_without_dsn_disables_reporting(monkeypatch) -> None:
    monkeypatch.setattr(sentry_module, "_SENTRY_INITIALISED", False)
    sdk = DummySDK()
    monkeypatch.setattr(sentry_module, "sentry_sdk", sdk)

    adapter = sentry_module.initialise_reporting(AppSettings())

    assert not adapter.enabled
    assert ErrInternalServerError.new().report() is False
    assert sdk.messages == []


def test_initialise_reporting_respects_disabled_flag(monkeypatch) -> None:
    monkeypatch.setattr(sentry_module, "_SENTRY_INITIALISED", False)
    sdk = DummySDK()
    monkeypatch.setattr(sentry_module, "sentry_sdk", sdk)

    adapter = sentry_module.initialise_reporting(_settings(enabled=False))

    assert not adapter.enabled
    assert sdk.init_calls == []
