from __future__ import annotations

from functools import lru_cache
from importlib import metadata

DIST_NAME = "verify-sdk"
SDK_REVISION = "0.3.0"


@lru_cache(maxsize=1)
def get_version() -> str:
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return SDK_REVISION
