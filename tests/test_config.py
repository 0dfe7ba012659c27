"""Tests for .env config loading."""

import os

from mediaembed import config


def test_defaults_when_nothing_is_set() -> None:
    assert config.get("MEDIAEMBED_DEFAULT_VIEW") == "view"
    assert config.get("MEDIAEMBED_MEDIA_URL_PREFIX") == ""
    assert config.get("MEDIAEMBED_UNKNOWN", "fallback") == "fallback"


def test_env_file_in_cwd_is_loaded(tmp_path) -> None:
    (tmp_path / ".env").write_text(
        "# comment\nMEDIAEMBED_DEFAULT_VIEW='post'\nnot a pair\n", encoding="utf-8",
    )
    assert config.get("MEDIAEMBED_DEFAULT_VIEW") == "post"


def test_nested_env_file_is_used_as_fallback(tmp_path) -> None:
    nested = tmp_path / ".mediaembed"
    nested.mkdir()
    (nested / ".env").write_text("MEDIAEMBED_LOG_LEVEL=debug\n", encoding="utf-8")
    assert config.get("MEDIAEMBED_LOG_LEVEL") == "debug"


def test_environment_wins_over_env_file(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("MEDIAEMBED_DEFAULT_VIEW=post\n", encoding="utf-8")
    monkeypatch.setenv("MEDIAEMBED_DEFAULT_VIEW", "editor")
    config.load_config()
    assert os.environ["MEDIAEMBED_DEFAULT_VIEW"] == "editor"
    assert config.get("MEDIAEMBED_DEFAULT_VIEW") == "editor"


def test_env_file_is_read_once(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("MEDIAEMBED_DEFAULT_VIEW=post\n", encoding="utf-8")
    config.load_config()
    assert config.get("MEDIAEMBED_DEFAULT_VIEW") == "post"

    (tmp_path / ".env").write_text("MEDIAEMBED_DEFAULT_VIEW=editor\n", encoding="utf-8")
    monkeypatch.delenv("MEDIAEMBED_DEFAULT_VIEW")
    config.load_config()
    assert config.get("MEDIAEMBED_DEFAULT_VIEW") == "view"
