from __future__ import annotations

import logging
from typing import Any

from .descriptor import ClientDescriptor
from .environment import ENDPOINT_PRODUCTION, EnvironmentHost, resolve_endpoint
from .errors import ConfigurationError

logger = logging.getLogger(__name__)


class ConfigBuilder:
    """Collects client settings and validates them once, in ``finalize()``.

    Example::

        descriptor = (
            ConfigBuilder()
            .with_context(ctx)
            .with_application_id("...")
            .with_shared_secret_key("...")
            .with_registration_token("...")  # optional, push integration only
            .finalize()
        )

    ``finalize()`` reports every missing parameter at once through
    ``ConfigurationError.missing``. It does not touch builder state, so each
    call returns a fresh descriptor built from the current values.
    """

    def __init__(self) -> None:
        self._context: Any = None
        self._application_id: str | None = None
        self._shared_secret_key: str | None = None
        self._environment_host: str | None = ENDPOINT_PRODUCTION
        self._registration_token: str | None = None

    def with_context(self, context: Any) -> "ConfigBuilder":
        self._context = context
        return self

    def with_application_id(self, application_id: str | None) -> "ConfigBuilder":
        self._application_id = application_id
        return self

    def with_shared_secret_key(self, shared_secret_key: str | None) -> "ConfigBuilder":
        self._shared_secret_key = shared_secret_key
        return self

    def with_environment_host(self, environment_host: EnvironmentHost | str | None) -> "ConfigBuilder":
        self._environment_host = resolve_endpoint(environment_host)
        if isinstance(environment_host, EnvironmentHost) and self._environment_host is None:
            logger.debug("environment %s has no endpoint, host left unset", environment_host.value)
        return self

    def with_registration_token(self, registration_token: str | None) -> "ConfigBuilder":
        self._registration_token = registration_token
        return self

    def missing_fields(self) -> tuple[str, ...]:
        missing: list[str] = []
        if self._context is None:
            missing.append("context")
        if not self._application_id:
            missing.append("application_id")
        if not self._shared_secret_key:
            missing.append("shared_secret_key")
        if not self._environment_host:
            missing.append("environment_host")
        return tuple(missing)

    def finalize(self) -> ClientDescriptor:
        missing = self.missing_fields()
        if missing:
            logger.debug("client descriptor rejected, missing: %s", ", ".join(missing))
            raise ConfigurationError(missing)

        descriptor = ClientDescriptor._create(
            self._context,
            self._application_id,
            self._shared_secret_key,
            self._environment_host,
            self._registration_token,
        )
        logger.debug(
            "client descriptor built for application %s at %s",
            descriptor.application_id,
            descriptor.environment_host,
        )
        return descriptor

    build = finalize
