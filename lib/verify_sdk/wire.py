"""Binary form used to hand a client descriptor across a process boundary.

Layout::

    b"VD" | version (1 byte) | 4 x (length: u32 big-endian | utf-8 bytes)

A length of ``0xFFFFFFFF`` marks an absent (``None``) field. The execution
context is never part of the payload.
"""
from __future__ import annotations

import base64
import logging
import re

from .errors import MalformedSerializedFormError

logger = logging.getLogger(__name__)

MAGIC = b"VD"
FORMAT_VERSION = 1
FIELD_NAMES = ("application_id", "shared_secret_key", "environment_host", "registration_token")
TEXT_PREFIX = "vsdk://"

_ABSENT = 0xFFFFFFFF
_LEN_SIZE = 4
_URLSAFE_B64_RE = re.compile(r"[A-Za-z0-9_-]*")


def encode_fields(fields: tuple[str | None, ...] | list[str | None]) -> bytes:
    if len(fields) != len(FIELD_NAMES):
        raise ValueError(f"expected {len(FIELD_NAMES)} fields, got {len(fields)}")
    out = bytearray(MAGIC)
    out.append(FORMAT_VERSION)
    for value in fields:
        if value is None:
            out += _ABSENT.to_bytes(_LEN_SIZE, "big")
            continue
        raw = value.encode("utf-8")
        out += len(raw).to_bytes(_LEN_SIZE, "big")
        out += raw
    return bytes(out)


def decode_fields(data: bytes) -> tuple[str | None, ...]:
    try:
        return _decode(bytes(data))
    except MalformedSerializedFormError as exc:
        logger.debug("rejecting serialized descriptor: %s", exc)
        raise


def _decode(data: bytes) -> tuple[str | None, ...]:
    header = len(MAGIC) + 1
    if len(data) < header:
        raise MalformedSerializedFormError("serialized form is shorter than its header")
    if data[: len(MAGIC)] != MAGIC:
        raise MalformedSerializedFormError("serialized form has an unknown marker")
    version = data[len(MAGIC)]
    if version != FORMAT_VERSION:
        raise MalformedSerializedFormError(f"unsupported serialized form version {version}")

    pos = header
    values: list[str | None] = []
    for name in FIELD_NAMES:
        if pos + _LEN_SIZE > len(data):
            raise MalformedSerializedFormError("truncated length prefix", field=name)
        length = int.from_bytes(data[pos:pos + _LEN_SIZE], "big")
        pos += _LEN_SIZE
        if length == _ABSENT:
            values.append(None)
            continue
        if pos + length > len(data):
            raise MalformedSerializedFormError("truncated field data", field=name)
        chunk = data[pos:pos + length]
        pos += length
        try:
            values.append(chunk.decode("utf-8"))
        except UnicodeDecodeError as exc:
            raise MalformedSerializedFormError("field is not valid utf-8", field=name) from exc

    if pos != len(data):
        raise MalformedSerializedFormError(f"{len(data) - pos} unexpected trailing bytes")
    return tuple(values)


def encode_text(data: bytes) -> str:
    b64 = base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")
    return f"{TEXT_PREFIX}{b64}"


def decode_text(text: str) -> bytes:
    value = (text or "").strip()
    if not value.startswith(TEXT_PREFIX):
        raise MalformedSerializedFormError(f"text form must start with {TEXT_PREFIX}")
    b64 = value[len(TEXT_PREFIX):]
    if not _URLSAFE_B64_RE.fullmatch(b64):
        raise MalformedSerializedFormError("text form is not valid base64")
    padded = b64 + "=" * (-len(b64) % 4)
    try:
        return base64.urlsafe_b64decode(padded)
    except ValueError as exc:
        raise MalformedSerializedFormError("text form is not valid base64") from exc
