import io
import sys

import pytest

import main
from dialog_unwrap.config import ENV_PRESENTER, reset_config


@pytest.fixture
def console(monkeypatch):
    monkeypatch.setenv(ENV_PRESENTER, "console")
    monkeypatch.setattr(sys, "stdin", io.StringIO())
    reset_config()


def test_success_prints_quotient(capsys):
    assert main.main(["2"]) == 0
    assert capsys.readouterr().out.strip() == "21.0"


def test_fallback_after_dialog(console, capsys):
    assert main.main(["0", "--fallback"]) == 0
    captured = capsys.readouterr()
    assert captured.out.strip() == "0.0"
    assert "とあるプロセスが異常終了しました。\ndivision by zero" in captured.err


def test_failure_exits(console):
    with pytest.raises(SystemExit) as exc:
        main.main(["0"])
    assert exc.value.code == 1
