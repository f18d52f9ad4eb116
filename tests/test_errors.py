import pytest

from dialog_unwrap.errors import (
    AppError, ErrorKind, Ok, Err, capture, context, fail, format_chain, iter_chain,
)


def _parse(text: str) -> int:
    try:
        return int(text)
    except ValueError as ex:
        raise RuntimeError("parse failed") from ex


def test_capture_wraps_value_and_exception():
    assert capture(int, "7") == Ok(7)
    r = capture(_parse, "x")
    assert isinstance(r, Err)
    assert isinstance(r.error, RuntimeError)


def test_context_is_noop_on_success():
    ok = Ok(1)
    assert ok.context("ignored") is ok
    assert context(ok, "ignored") is ok
    assert ok.with_context(lambda: pytest.fail("not evaluated")) is ok


def test_context_layers_read_outermost_first():
    r = fail("disk full", source="io").context("save failed").with_context(lambda: "export failed")
    assert isinstance(r.error, AppError)
    assert r.error.kind is ErrorKind.CONTEXT
    assert list(iter_chain(r.error)) == [
        "export failed",
        "save failed",
        "GENERIC: disk full (source: io)",
    ]


def test_module_context_rejects_non_results():
    with pytest.raises(TypeError):
        context("not a result", "msg")


def test_explicit_exception_cause_is_followed():
    r = capture(_parse, "x").context("load settings")
    assert format_chain(r.error) == (
        "load settings\nparse failed\ninvalid literal for int() with base 10: 'x'"
    )


def test_implicit_exception_context_is_followed():
    def handler():
        try:
            {}["missing"]
        except KeyError:
            raise RuntimeError("lookup crashed")

    r = capture(handler)
    assert list(iter_chain(r.error)) == ["lookup crashed", "'missing'"]


def test_suppressed_context_is_not_followed():
    def handler():
        try:
            {}["missing"]
        except KeyError:
            raise RuntimeError("lookup crashed") from None

    assert list(iter_chain(capture(handler).error)) == ["lookup crashed"]


def test_empty_exception_message_uses_type_name():
    assert format_chain(ValueError()) == "ValueError"


def test_plain_values_and_separator():
    assert format_chain("just text") == "just text"
    r = Err("inner").context("outer")
    assert format_chain(r.error, separator=" / ") == "outer / inner"


def test_cyclic_causes_terminate():
    a, b = RuntimeError("a"), RuntimeError("b")
    a.__cause__ = b
    b.__cause__ = a
    assert list(iter_chain(a)) == ["a", "b"]


def test_app_error_str():
    assert str(AppError(ErrorKind.UI, "window lost")) == "UI: window lost"
    assert str(AppError(ErrorKind.CONTEXT, "opening")) == "opening"
