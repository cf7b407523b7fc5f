from __future__ import annotations

import itertools

import pytest

from verify_sdk import ConfigBuilder, ConfigurationError, ENDPOINT_PRODUCTION, EnvironmentHost

REQUIRED = ("context", "application_id", "shared_secret_key", "environment_host")


def _builder(**values) -> ConfigBuilder:
    b = ConfigBuilder()
    if "context" in values:
        b.with_context(values["context"])
    if "application_id" in values:
        b.with_application_id(values["application_id"])
    if "shared_secret_key" in values:
        b.with_shared_secret_key(values["shared_secret_key"])
    if "environment_host" in values:
        b.with_environment_host(values["environment_host"])
    return b


def test_finalize_with_defaults_uses_production_host() -> None:
    ctx = object()
    descriptor = (
        ConfigBuilder()
        .with_context(ctx)
        .with_application_id("app-1")
        .with_shared_secret_key("secret-xyz")
        .finalize()
    )

    assert descriptor.context is ctx
    assert descriptor.application_id == "app-1"
    assert descriptor.shared_secret_key == "secret-xyz"
    assert descriptor.environment_host == ENDPOINT_PRODUCTION
    assert descriptor.registration_token is None


def test_finalize_reports_every_missing_field_in_order() -> None:
    b = ConfigBuilder().with_application_id("app-1").with_environment_host(EnvironmentHost.SANDBOX)

    with pytest.raises(ConfigurationError) as excinfo:
        b.finalize()

    assert excinfo.value.missing == ("context", "shared_secret_key", "environment_host")
    assert "context, shared_secret_key, environment_host" in str(excinfo.value)


def test_finalize_only_application_id_keeps_default_host() -> None:
    with pytest.raises(ConfigurationError) as excinfo:
        ConfigBuilder().with_application_id("app-1").finalize()
    assert excinfo.value.missing == ("context", "shared_secret_key")


@pytest.mark.parametrize("mask", list(itertools.product([True, False], repeat=4)))
def test_finalize_succeeds_only_when_all_required_present(mask) -> None:
    present = {"context": object(), "application_id": "a", "shared_secret_key": "s", "environment_host": "https://h"}
    empty = {"context": None, "application_id": "", "shared_secret_key": "", "environment_host": ""}
    values = {name: (present[name] if keep else empty[name]) for name, keep in zip(REQUIRED, mask)}
    expected_missing = tuple(name for name, keep in zip(REQUIRED, mask) if not keep)

    b = _builder(**values)
    if not expected_missing:
        assert b.finalize().application_id == "a"
        return
    with pytest.raises(ConfigurationError) as excinfo:
        b.finalize()
    assert excinfo.value.missing == expected_missing


def test_named_production_matches_literal_endpoint() -> None:
    named = _builder(context=1, application_id="a", shared_secret_key="s",
                     environment_host=EnvironmentHost.PRODUCTION).finalize()
    literal = _builder(context=1, application_id="a", shared_secret_key="s",
                       environment_host=ENDPOINT_PRODUCTION).finalize()
    assert named.environment_host == literal.environment_host == ENDPOINT_PRODUCTION


def test_setters_last_write_wins() -> None:
    descriptor = (
        ConfigBuilder()
        .with_context("first")
        .with_context("second")
        .with_application_id("a1")
        .with_application_id("a2")
        .with_shared_secret_key("s")
        .with_environment_host(EnvironmentHost.SANDBOX)
        .with_environment_host("https://custom.example.com")
        .with_registration_token("t1")
        .with_registration_token("t2")
        .finalize()
    )
    assert descriptor.context == "second"
    assert descriptor.application_id == "a2"
    assert descriptor.environment_host == "https://custom.example.com"
    assert descriptor.registration_token == "t2"


def test_finalize_twice_returns_independent_descriptors() -> None:
    b = _builder(context=1, application_id="a", shared_secret_key="s").with_registration_token("tok")
    first = b.finalize()
    second = b.build()

    assert first is not second
    assert first == second
    first.set_registration_token("rotated")
    assert second.registration_token == "tok"
