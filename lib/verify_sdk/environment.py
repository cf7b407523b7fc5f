from __future__ import annotations

import enum

ENDPOINT_PRODUCTION = "https://api.nexmo.com/"


class EnvironmentHost(enum.Enum):
    """Named environments a client descriptor can point at."""

    PRODUCTION = "production"
    # No endpoint published yet; selecting it leaves the host unset.
    SANDBOX = "sandbox"


_ENDPOINTS: dict[EnvironmentHost, str] = {
    EnvironmentHost.PRODUCTION: ENDPOINT_PRODUCTION,
}


def resolve_endpoint(value: EnvironmentHost | str | None) -> str | None:
    if isinstance(value, EnvironmentHost):
        return _ENDPOINTS.get(value)
    return value


def parse_environment(text: str | None) -> EnvironmentHost | str:
    value = (text or "").strip()
    for member in EnvironmentHost:
        if value.lower() == member.value:
            return member
    return value
