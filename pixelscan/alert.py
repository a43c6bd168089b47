"""Blocking alert dialogs shown through an external message program."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence

MESSAGE_PROGRAMS = ("gmessage", "gxmessage", "kmessage", "xmessage")
"""Message programs to try, in order of preference."""

# Exit status used to report that the program could not be started.
_EXEC_FAILED_STATUS = 42
_DEFAULT_RESPONSE = 2
_CANCEL_RESPONSE = 3

# Program that worked last time; later alerts use it without searching again.
_last_program: str | None = None


class AlertError(Exception):
    """Raised when an alert could not be shown."""


class _ProgramNotFound(Exception):
    pass


def _run_task(argv: Sequence[str]) -> int:
    """Run ``argv`` to completion and return its exit status."""
    try:
        completed = subprocess.run(list(argv), check=False)
    except FileNotFoundError as exc:
        raise _ProgramNotFound(argv[0]) from exc
    except OSError as exc:
        raise AlertError(f"could not start {argv[0]}: {exc}") from exc
    status = completed.returncode
    if status < 0 or status == _EXEC_FAILED_STATUS:
        raise _ProgramNotFound(argv[0])
    return status


def _message(args: Sequence[str]) -> int:
    global _last_program
    if _last_program is not None:
        try:
            return _run_task([_last_program, *args])
        except _ProgramNotFound as exc:
            raise AlertError("xmessage or equivalent not found.") from exc

    for program in MESSAGE_PROGRAMS:
        try:
            status = _run_task([program, *args])
        except _ProgramNotFound:
            continue
        _last_program = program
        return status
    raise AlertError("xmessage or equivalent not found.")


def show_alert(
    title: str,
    msg: str,
    default_button: str | None = None,
    cancel_button: str | None = None,
) -> bool:
    """Show an alert and wait for the user.

    Returns ``True`` if the default button was pressed and ``False`` if the
    cancel button (or anything else) was. Raises :class:`AlertError` if the
    alert could not be shown.
    """
    if default_button is None:
        default_button = "OK"
    if cancel_button is None:
        buttons = f"{default_button}:{_DEFAULT_RESPONSE}"
    else:
        buttons = f"{default_button}:{_DEFAULT_RESPONSE},{cancel_button}:{_CANCEL_RESPONSE}"

    args = [
        msg,
        "-title",
        title,
        "-center",
        "-buttons",
        buttons,
        "-default",
        default_button,
    ]
    return _message(args) == _DEFAULT_RESPONSE