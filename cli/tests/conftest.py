from __future__ import annotations

import pytest

from verify_cli import config


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    def _config_dir(_: str) -> str:
        return str(tmp_path)

    monkeypatch.setattr(config, "user_config_dir", _config_dir)
    for name in (
            config.ENV_APPLICATION_ID,
            config.ENV_SHARED_SECRET_KEY,
            config.ENV_ENVIRONMENT,
            config.ENV_REGISTRATION_TOKEN,
    ):
        monkeypatch.delenv(name, raising=False)
    return tmp_path
