from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from typing import Any

import tomli_w
from platformdirs import user_config_dir

from verify_sdk.environment import ENDPOINT_PRODUCTION, EnvironmentHost, parse_environment

APP_NAME = "verify-sdk"
CONFIG_FILENAME = "config.toml"
ENVIRONMENT_DEFAULT = EnvironmentHost.PRODUCTION.value

ENV_APPLICATION_ID = "VERIFY_SDK_APPLICATION_ID"
ENV_SHARED_SECRET_KEY = "VERIFY_SDK_SHARED_SECRET_KEY"
ENV_ENVIRONMENT = "VERIFY_SDK_ENVIRONMENT"
ENV_REGISTRATION_TOKEN = "VERIFY_SDK_REGISTRATION_TOKEN"

SETTING_KEYS = ("application_id", "shared_secret_key", "environment", "registration_token")


@dataclass
class ClientSettings:
    application_id: str = ""
    shared_secret_key: str = ""
    environment: str = ENVIRONMENT_DEFAULT
    registration_token: str | None = None


@dataclass
class AppConfig:
    client: ClientSettings = field(default_factory=ClientSettings)


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(client=ClientSettings())


def normalize_endpoint(raw: str | None) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"
    return f"{scheme}{value}"


def normalize_environment(raw: str | None) -> str:
    """Keep named environments as names; give literal endpoints a scheme.

    A literal that points at the production endpoint is stored as the
    ``production`` name so both spellings resolve to ``ENDPOINT_PRODUCTION``.
    """
    parsed = parse_environment(raw)
    if isinstance(parsed, EnvironmentHost):
        return parsed.value
    endpoint = normalize_endpoint(parsed)
    if endpoint == normalize_endpoint(ENDPOINT_PRODUCTION):
        return EnvironmentHost.PRODUCTION.value
    return endpoint


def ensure_parent_dir(path: str) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    return _prune_none(
        {
            "client": {
                "application_id": cfg.client.application_id,
                "shared_secret_key": cfg.client.shared_secret_key,
                "environment": cfg.client.environment,
                "registration_token": cfg.client.registration_token,
            },
        }
    )


def _prune_none(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _prune_none(v) for k, v in value.items() if v is not None}
    if isinstance(value, list):
        return [_prune_none(item) for item in value if item is not None]
    return value


def from_toml(data: dict[str, Any]) -> AppConfig:
    client_raw = data.get("client") or {}
    if not isinstance(client_raw, dict):
        return default_config()

    token = client_raw.get("registration_token")
    return AppConfig(
        client=ClientSettings(
            application_id=str(client_raw.get("application_id") or "").strip(),
            shared_secret_key=str(client_raw.get("shared_secret_key") or "").strip(),
            environment=normalize_environment(str(client_raw.get("environment") or ENVIRONMENT_DEFAULT)),
            registration_token=token if isinstance(token, str) and token else None,
        )
    )


def load_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
        return from_toml(data)
    except FileNotFoundError:
        return default_config()


def apply_env_overrides(cfg: AppConfig) -> AppConfig:
    client = cfg.client
    application_id = os.getenv(ENV_APPLICATION_ID, "").strip()
    shared_secret_key = os.getenv(ENV_SHARED_SECRET_KEY, "").strip()
    environment = os.getenv(ENV_ENVIRONMENT, "").strip()
    registration_token = os.getenv(ENV_REGISTRATION_TOKEN, "").strip()
    return AppConfig(
        client=ClientSettings(
            application_id=application_id or client.application_id,
            shared_secret_key=shared_secret_key or client.shared_secret_key,
            environment=normalize_environment(environment) if environment else client.environment,
            registration_token=registration_token or client.registration_token,
        )
    )


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    ensure_parent_dir(path)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
