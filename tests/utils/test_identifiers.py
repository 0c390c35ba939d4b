"""Tests for identifier utilities."""

from error_taxonomy.utils.identifiers import (
    DefaultErrorIDGenerator,
    ErrorIDGenerator,
    generate_error_id,
)


def test_default_ids_are_uppercase_alphanumeric_without_dashes() -> None:
    """Default ids carry the prefix followed by 32 uppercase hex characters."""
    value = generate_error_id()
    assert value.startswith("ERR")
    assert "-" not in value
    assert value.isalnum()
    assert value == value.upper()
    assert len(value) == 3 + 32


def test_generator_prefix_is_configurable() -> None:
    generator = DefaultErrorIDGenerator(prefix="ORD")
    assert generator.generate_id().startswith("ORD")
    assert isinstance(generator, ErrorIDGenerator)


def test_random_suffix(monkeypatch) -> None:
    """The suffix comes from a random UUID; patched here to stay deterministic."""

    class _FakeUUID:
        hex = "a1b2c3d4e5f6a1b2c3d4e5f6a1b2c3d4"

    monkeypatch.setattr("error_taxonomy.utils.identifiers.uuid.uuid4", lambda: _FakeUUID())
    assert generate_error_id() == "ERRA1B2C3D4E5F6A1B2C3D4E5F6A1B2C3D4"
