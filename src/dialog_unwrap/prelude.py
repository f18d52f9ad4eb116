"""Convenience imports: ``from dialog_unwrap.prelude import *``."""
from dialog_unwrap.errors import (  # noqa: F401
    Ok, Err, Result, AppError, ErrorKind, capture, context, fail, format_chain,
)
from dialog_unwrap.unwrapper import (  # noqa: F401
    define_unwrapper,
    ok_unwrap_or_dialog,
    ok_unwrap_or_dialog_with_title,
    show_error_dialog,
    unwrap_or_dialog,
    unwrap_or_dialog_default,
    unwrap_or_dialog_with_title,
)

__all__ = [
    "Ok", "Err", "Result", "AppError", "ErrorKind",
    "capture", "context", "fail", "format_chain",
    "define_unwrapper", "show_error_dialog",
    "unwrap_or_dialog", "unwrap_or_dialog_with_title", "unwrap_or_dialog_default",
    "ok_unwrap_or_dialog", "ok_unwrap_or_dialog_with_title",
]
