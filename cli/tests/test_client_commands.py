from __future__ import annotations

import json

from typer.testing import CliRunner

from verify_sdk import ClientDescriptor, ConfigBuilder

from verify_cli import main


def _text(token: str | None = None) -> str:
    return (
        ConfigBuilder()
        .with_context("test")
        .with_application_id("app-1")
        .with_shared_secret_key("secret-xyz")
        .with_registration_token(token)
        .finalize()
        .to_text()
    )


def test_build_from_options(config_dir) -> None:
    result = CliRunner().invoke(
        main._build_app(),
        ["client", "build", "--application-id", "app-1", "--shared-secret-key", "secret-xyz",
         "--registration-token", "push-1"],
    )
    assert result.exit_code == 0, result.output

    descriptor = ClientDescriptor.from_text(result.output.strip(), None)
    assert descriptor.application_id == "app-1"
    assert descriptor.shared_secret_key == "secret-xyz"
    assert descriptor.registration_token == "push-1"


def test_build_reports_all_missing_fields(config_dir) -> None:
    result = CliRunner().invoke(main._build_app(), ["client", "build", "--environment", "sandbox"])
    assert result.exit_code == 2
    assert "missing: application_id" in result.output
    assert "missing: shared_secret_key" in result.output
    assert "missing: environment_host" in result.output


def test_build_json_masks_secret(config_dir) -> None:
    result = CliRunner().invoke(
        main._build_app(),
        ["client", "build", "--application-id", "app-1", "--shared-secret-key", "secret-xyz", "--json"],
    )
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["shared_secret_key"] == "(set)"
    assert data["text"].startswith("vsdk://")


def test_inspect_with_secret(config_dir) -> None:
    result = CliRunner().invoke(main._build_app(), ["client", "inspect", _text(), "--show-secret"])
    assert result.exit_code == 0
    assert "SharedKey: secret-xyz" in result.output
    assert "RegistrationToken:" in result.output


def test_inspect_json(config_dir) -> None:
    result = CliRunner().invoke(main._build_app(), ["client", "inspect", _text("t"), "--json"])
    assert result.exit_code == 0
    assert json.loads(result.output)["registration_token"] == "t"


def test_inspect_rejects_malformed_text(config_dir) -> None:
    result = CliRunner().invoke(main._build_app(), ["client", "inspect", "vsdk://AAAA"])
    assert result.exit_code == 2
    assert "Cannot decode descriptor" in result.output


def test_rotate_token(config_dir) -> None:
    result = CliRunner().invoke(main._build_app(), ["client", "rotate-token", _text("old"), "new"])
    assert result.exit_code == 0, result.output
    assert ClientDescriptor.from_text(result.output.strip(), None).registration_token == "new"
