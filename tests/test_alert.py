import subprocess
from unittest import mock

import pytest

from pixelscan import alert
from pixelscan.alert import AlertError, show_alert


@pytest.fixture(autouse=True)
def _fresh_cache(monkeypatch):
    monkeypatch.setattr(alert, "_last_program", None)


def _completed(status):
    def run(argv, check=False):
        return subprocess.CompletedProcess(argv, status)

    return run


def test_default_button_pressed():
    with mock.patch("subprocess.run", side_effect=_completed(2)) as run:
        assert show_alert("Title", "Hello", None, None) is True
    argv = run.call_args.args[0]
    assert argv == [
        "gmessage",
        "Hello",
        "-title",
        "Title",
        "-center",
        "-buttons",
        "OK:2",
        "-default",
        "OK",
    ]


def test_cancel_button_pressed():
    with mock.patch("subprocess.run", side_effect=_completed(3)) as run:
        assert show_alert("T", "M", "Yes", "No") is False
    argv = run.call_args.args[0]
    assert argv[argv.index("-buttons") + 1] == "Yes:2,No:3"
    assert argv[argv.index("-default") + 1] == "Yes"


def test_falls_back_to_next_program():
    calls = []

    def run(argv, check=False):
        calls.append(argv[0])
        if argv[0] == "gmessage":
            raise FileNotFoundError(argv[0])
        return subprocess.CompletedProcess(argv, 2)

    with mock.patch("subprocess.run", side_effect=run):
        assert show_alert("T", "M", None, None) is True
    assert calls == ["gmessage", "gxmessage"]


def test_exit_status_42_counts_as_missing_program():
    calls = []

    def run(argv, check=False):
        calls.append(argv[0])
        status = 42 if argv[0] != "xmessage" else 3
        return subprocess.CompletedProcess(argv, status)

    with mock.patch("subprocess.run", side_effect=run):
        assert show_alert("T", "M", None, "Cancel") is False
    assert calls == list(alert.MESSAGE_PROGRAMS)


def test_no_program_available_raises():
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("x")):
        with pytest.raises(AlertError):
            show_alert("T", "M", None, None)


def test_working_program_is_remembered():
    calls = []

    def run(argv, check=False):
        calls.append(argv[0])
        if argv[0] in ("gmessage", "gxmessage"):
            raise FileNotFoundError(argv[0])
        return subprocess.CompletedProcess(argv, 2)

    with mock.patch("subprocess.run", side_effect=run):
        show_alert("T", "M", None, None)
        calls.clear()
        assert show_alert("T", "M", None, None) is True
    assert calls == ["kmessage"]


def test_remembered_program_failing_raises_without_search():
    def first(argv, check=False):
        return subprocess.CompletedProcess(argv, 2)

    with mock.patch("subprocess.run", side_effect=first):
        show_alert("T", "M", None, None)
    with mock.patch("subprocess.run", side_effect=FileNotFoundError("x")) as run:
        with pytest.raises(AlertError):
            show_alert("T", "M", None, None)
    assert run.call_count == 1


def test_start_failure_raises():
    with mock.patch("subprocess.run", side_effect=PermissionError("denied")):
        with pytest.raises(AlertError):
            show_alert("T", "M", None, None)