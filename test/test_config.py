import pytest

from blockkit_builder.config import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BLOCKKIT_LOG_FILE", raising=False)
    monkeypatch.delenv("BLOCKKIT_LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)  # type: ignore

    assert settings.LOG_FILE is None
    assert settings.LOG_LEVEL == "INFO"


def test_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BLOCKKIT_LOG_FILE", "store/logs.csv")
    monkeypatch.setenv("BLOCKKIT_LOG_LEVEL", "DEBUG")

    settings = Settings(_env_file=None)  # type: ignore

    assert settings.LOG_FILE == "store/logs.csv"
    assert settings.LOG_LEVEL == "DEBUG"


def test_settings_ignore_unrelated_env_file_keys(
    tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("BLOCKKIT_LOG_LEVEL", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text(
        "SLACK_BOT_TOKEN=xoxb-1\nADMIN_CHANNEL=C01\nBLOCKKIT_LOG_LEVEL=WARNING\n",
        encoding="utf-8",
    )

    settings = Settings(_env_file=env_file)  # type: ignore

    assert settings.LOG_LEVEL == "WARNING"
    assert not hasattr(settings, "SLACK_BOT_TOKEN")
