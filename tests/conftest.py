from pathlib import Path
import pytest

from dialog_unwrap.config import ENV_CONFIG_PATH, ENV_LOCALE, ENV_PRESENTER, reset_config


class CountingPresenter:
    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    def __call__(self, title: str, body: str) -> None:
        self.calls.append((title, body))


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch):
    monkeypatch.setenv(ENV_CONFIG_PATH, str(tmp_path / "missing.yaml"))
    monkeypatch.delenv(ENV_LOCALE, raising=False)
    monkeypatch.delenv(ENV_PRESENTER, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def presenter() -> CountingPresenter:
    return CountingPresenter()
