from pathlib import Path

import pytest


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run with an empty working directory and user config directory."""
    user_dir = tmp_path / "user-config"
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("SHAMIR_LOG_LEVEL", raising=False)
    monkeypatch.setattr("shamir_disclosure.config.runtime_config_dir", lambda: user_dir)
    return tmp_path
