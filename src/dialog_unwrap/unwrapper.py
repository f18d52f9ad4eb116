"""Unwrap a Result or surface its failure in a blocking error dialog.

Every function here consumes one ``Ok``/``Err``. ``Ok`` yields its value with
no side effect. ``Err`` shows exactly one dialog whose body is the error chain,
outermost context first, and then either terminates the process
(``unwrap_or_dialog*``) or hands back a fallback (``unwrap_or_dialog_default``,
``ok_unwrap_or_dialog*``).

    from dialog_unwrap.unwrapper import unwrap_or_dialog
    from dialog_unwrap.errors import capture

    ratio = unwrap_or_dialog(capture(lambda: a / b).context("Ratio failed"))
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, NoReturn, Optional, TypeVar
import logging
import sys

from dialog_unwrap.config import get_config
from dialog_unwrap.errors import Ok, Err, Result, format_chain
from dialog_unwrap.messages import translate, UNEXPECTED_ERROR
from dialog_unwrap.ui.message_box import Presenter, resolve_presenter

LOG_UI = logging.getLogger("dialog_unwrap.ui")

T = TypeVar("T")

Terminate = Callable[[int], Any]


@dataclass(frozen=True)
class DialogRequest:
    title: str
    body: str


def default_title() -> str:
    cfg = get_config()
    return cfg.title or translate(UNEXPECTED_ERROR, cfg.locale)


def show_error_dialog(title: Any, error: Any, presenter: Optional[Presenter] = None) -> DialogRequest:
    """Render *error*'s chain and present it once under *title*."""
    request = DialogRequest(str(title), format_chain(error))
    LOG_UI.error("%s: %s", request.title, request.body.replace("\n", " <- "))
    if presenter is None:
        presenter = resolve_presenter(get_config().presenter)
    presenter(request.title, request.body)
    return request


def _abort(request: DialogRequest, terminate: Optional[Terminate]) -> NoReturn:
    code = get_config().exit_code
    LOG_UI.critical("Terminating (exit code %d) after error dialog '%s'", code, request.title)
    (terminate or sys.exit)(code)
    # a terminate hook that returns must not let the caller continue
    raise SystemExit(code)


def _failure(result: Result[T, Any]) -> Optional[Err]:
    if isinstance(result, Ok):
        return None
    if isinstance(result, Err):
        return result
    raise TypeError(f"Expected Ok or Err, got {type(result).__name__}")


def unwrap_or_dialog_with_title(
    result: Result[T, Any],
    title: Any,
    *,
    presenter: Optional[Presenter] = None,
    terminate: Optional[Terminate] = None,
) -> T:
    err = _failure(result)
    if err is None:
        return result.value
    _abort(show_error_dialog(title, err.error, presenter), terminate)


def unwrap_or_dialog(
    result: Result[T, Any],
    *,
    presenter: Optional[Presenter] = None,
    terminate: Optional[Terminate] = None,
) -> T:
    """Return the success value, or show the error and exit with a failure status."""
    err = _failure(result)
    if err is None:
        return result.value
    _abort(show_error_dialog(default_title(), err.error, presenter), terminate)


def unwrap_or_dialog_default(
    result: Result[T, Any],
    default_factory: Callable[[], T],
    *,
    title: Any = None,
    presenter: Optional[Presenter] = None,
) -> T:
    """Return the success value, or show the error and return ``default_factory()``."""
    err = _failure(result)
    if err is None:
        return result.value
    show_error_dialog(default_title() if title is None else title, err.error, presenter)
    return default_factory()


def ok_unwrap_or_dialog_with_title(
    result: Result[T, Any],
    title: Any,
    *,
    presenter: Optional[Presenter] = None,
) -> Optional[T]:
    err = _failure(result)
    if err is None:
        return result.value
    show_error_dialog(title, err.error, presenter)
    return None


def ok_unwrap_or_dialog(result: Result[T, Any], *, presenter: Optional[Presenter] = None) -> Optional[T]:
    err = _failure(result)
    if err is None:
        return result.value
    show_error_dialog(default_title(), err.error, presenter)
    return None


# ----------------------- Scoped unwrappers ------------------------------
@dataclass(frozen=True)
class ScopedUnwrapper:
    """Unwrapper bound to a dialog title and a context describer.

    ``describe(*args)`` is attached as context only when the target failed.
    """
    title: str
    describe: Callable[..., str]

    def _with_context(self, target: Result[T, Any], args: tuple) -> Result[T, Any]:
        _failure(target)
        return target.with_context(lambda: self.describe(*args))

    def unwrap_or_dialog(
        self,
        target: Result[T, Any],
        *args: Any,
        presenter: Optional[Presenter] = None,
        terminate: Optional[Terminate] = None,
    ) -> T:
        return unwrap_or_dialog_with_title(
            self._with_context(target, args), self.title, presenter=presenter, terminate=terminate
        )

    def ok_unwrap_or_dialog(
        self, target: Result[T, Any], *args: Any, presenter: Optional[Presenter] = None
    ) -> Optional[T]:
        return ok_unwrap_or_dialog_with_title(self._with_context(target, args), self.title, presenter=presenter)

    def unwrap_or_dialog_default(
        self,
        target: Result[T, Any],
        default_factory: Callable[[], T],
        *args: Any,
        presenter: Optional[Presenter] = None,
    ) -> T:
        return unwrap_or_dialog_default(
            self._with_context(target, args), default_factory, title=self.title, presenter=presenter
        )


def define_unwrapper(title: Any, describe: Callable[..., str]) -> ScopedUnwrapper:
    """Create a module-level unwrapper with a fixed title and context message.

        load_profile = define_unwrapper("Profile", lambda name: f"Could not load profile '{name}'")
        profile = load_profile.unwrap_or_dialog(read_profile(name), name)
    """
    return ScopedUnwrapper(str(title), describe)
