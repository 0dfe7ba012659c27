import pytest

from mediaembed import config


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch) -> None:
    """Run every test with no MEDIAEMBED_* env vars and no .env files."""
    for key in config.DEFAULTS:
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config, "_loaded", False)
