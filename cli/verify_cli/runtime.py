from __future__ import annotations

import os
import socket
from dataclasses import dataclass, field

from verify_sdk import ConfigBuilder
from verify_sdk.environment import parse_environment

from .config import AppConfig, apply_env_overrides, config_path, normalize_environment


@dataclass(frozen=True)
class RuntimeContext:
    """Execution context the CLI hands to every descriptor it builds or decodes."""

    hostname: str = field(default_factory=lambda: socket.gethostname() or "localhost")
    pid: int = field(default_factory=os.getpid)
    config_path: str = field(default_factory=config_path)


def make_builder(
    cfg: AppConfig,
    *,
    application_id: str | None = None,
    shared_secret_key: str | None = None,
    environment: str | None = None,
    registration_token: str | None = None,
    context: RuntimeContext | None = None,
) -> ConfigBuilder:
    # options > env > settings file
    settings = apply_env_overrides(cfg).client
    return (
        ConfigBuilder()
        .with_context(context or RuntimeContext())
        .with_application_id(application_id or settings.application_id)
        .with_shared_secret_key(shared_secret_key or settings.shared_secret_key)
        .with_environment_host(parse_environment(normalize_environment(environment) if environment else settings.environment))
        .with_registration_token(registration_token or settings.registration_token)
    )
