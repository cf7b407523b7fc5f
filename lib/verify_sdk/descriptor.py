from __future__ import annotations

import threading
from dataclasses import InitVar, dataclass, field
from typing import Any

from . import wire
from .version import get_version

_FACTORY_KEY = object()


class RegistrationTokenCell:
    """Single lock-guarded slot holding the push registration token."""

    __slots__ = ("_lock", "_value")

    def __init__(self, value: str | None = None):
        self._lock = threading.Lock()
        self._value = value

    def get(self) -> str | None:
        with self._lock:
            return self._value

    def set(self, value: str | None) -> None:
        with self._lock:
            self._value = value


@dataclass(frozen=True)
class ClientDescriptor:
    """Validated configuration of an authenticated verification session.

    Instances come out of ``ConfigBuilder.finalize()`` or ``deserialize()``;
    calling the constructor directly raises ``TypeError``. Everything is
    read-only except the registration token, which lives in its own
    synchronized cell and can be rotated with ``set_registration_token``.

    The execution context is opaque to the SDK and is never serialized;
    whoever reconstructs a descriptor supplies their own.
    """

    context: Any = field(repr=False, compare=False)
    application_id: str
    shared_secret_key: str = field(repr=False)
    environment_host: str
    registration: RegistrationTokenCell = field(
        default_factory=RegistrationTokenCell,
        init=False,
        repr=False,
        compare=False,
    )
    token: InitVar[str | None] = None
    factory_key: InitVar[object] = None

    def __post_init__(self, token: str | None, factory_key: object) -> None:
        if factory_key is not _FACTORY_KEY:
            raise TypeError(
                "ClientDescriptor is created by ConfigBuilder.finalize() or ClientDescriptor.deserialize()"
            )
        self.registration.set(token)

    @classmethod
    def _create(
        cls,
        context: Any,
        application_id: str,
        shared_secret_key: str,
        environment_host: str,
        registration_token: str | None = None,
    ) -> "ClientDescriptor":
        return cls(
            context,
            application_id,
            shared_secret_key,
            environment_host,
            token=registration_token,
            factory_key=_FACTORY_KEY,
        )

    @property
    def registration_token(self) -> str | None:
        return self.registration.get()

    def set_registration_token(self, token: str | None) -> None:
        """Replace the registration token whenever a new one is issued."""
        self.registration.set(token)

    @staticmethod
    def get_version() -> str:
        return get_version()

    def serialize(self) -> bytes:
        return wire.encode_fields(
            (
                self.application_id,
                self.shared_secret_key,
                self.environment_host,
                self.registration_token,
            )
        )

    @classmethod
    def deserialize(cls, data: bytes, context: Any) -> "ClientDescriptor":
        # Trusted path: the bytes come from a descriptor that was already validated.
        app_id, secret, host, token = wire.decode_fields(data)
        return cls._create(context, app_id, secret, host, token)

    def to_text(self) -> str:
        return wire.encode_text(self.serialize())

    @classmethod
    def from_text(cls, text: str, context: Any) -> "ClientDescriptor":
        return cls.deserialize(wire.decode_text(text), context)

    def to_dict(self, *, include_secret: bool = False) -> dict[str, str | None]:
        secret = self.shared_secret_key if include_secret else _mask(self.shared_secret_key)
        return {
            "application_id": self.application_id,
            "shared_secret_key": secret,
            "environment_host": self.environment_host,
            "registration_token": self.registration_token,
        }

    def describe(self) -> str:
        parts = [
            ("ApplicationId", self.application_id),
            ("SharedKey", self.shared_secret_key),
            ("Environment", self.environment_host),
            ("RegistrationToken", self.registration_token),
        ]
        return ",".join(f"{label}: {value if value is not None else ''}" for label, value in parts)


def _mask(value: str | None) -> str:
    return "(set)" if value else "(empty)"
