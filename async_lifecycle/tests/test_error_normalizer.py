"""Unit tests for the default error normalizer and SerializedError shape."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from async_lifecycle.base.errors import AbortError, SerializedError, normalize_error


def test_mapping_keeps_only_string_common_fields():
    result = normalize_error({"name": "E", "message": "boom", "extra": 1})
    assert result.to_dict() == {"name": "E", "message": "boom"}  # nosec B101 - pytest assert in tests


def test_mapping_drops_non_string_values():
    result = normalize_error({"name": 3, "message": "m", "code": None, "stack": ["x"]})
    assert result.to_dict() == {"message": "m"}  # nosec B101


@pytest.mark.parametrize(
    ("value", "message"),
    [(42, "42"), ("plain", "plain"), (None, "None"), (True, "True"), (1.5, "1.5")],
)
def test_scalars_become_message(value, message):
    assert normalize_error(value).to_dict() == {"message": message}  # nosec B101


def test_exception_uses_class_name_and_message():
    result = normalize_error(ValueError("boom"))
    assert result.name == "ValueError"  # nosec B101
    assert result.message == "boom"  # nosec B101
    assert result.stack is None  # nosec B101 - never raised, no traceback


def test_raised_exception_carries_stack():
    try:
        raise KeyError("missing")
    except KeyError as exc:
        result = normalize_error(exc)
    assert result.stack is not None and "KeyError" in result.stack  # nosec B101


def test_exception_string_attributes_take_precedence():
    class CodedError(Exception):
        code = "E_CODED"

    result = normalize_error(AbortError("stop"))
    assert result.to_dict() == {"name": "AbortError", "message": "stop"}  # nosec B101
    assert normalize_error(CodedError("x")).code == "E_CODED"  # nosec B101


def test_plain_object_attributes():
    class Failure:
        name = "Failure"
        message = "it broke"
        code = 500

    assert normalize_error(Failure()).to_dict() == {"name": "Failure", "message": "it broke"}  # nosec B101


def test_hostile_accessors_never_raise():
    class Hostile:
        name = "Hostile"

        @property
        def message(self):
            raise RuntimeError("nope")

    assert normalize_error(Hostile()).to_dict() == {"name": "Hostile"}  # nosec B101


def test_serialized_error_is_frozen_and_strict():
    err = SerializedError(message="m")
    with pytest.raises(ValidationError):
        SerializedError(message="m", extra="nope")
    with pytest.raises(ValidationError):
        err.message = "changed"  # type: ignore[misc]


def test_builtin_name_attribute_does_not_replace_class_name():
    result = normalize_error(ImportError("no module", name="missing_mod"))
    assert result.name == "ImportError" and result.message == "no module"  # nosec B101


class _Unprintable(Exception):
    def __str__(self):
        raise RuntimeError("no str")


class _UnprintableWithMessage(_Unprintable):
    message = "has a message"


def test_exception_with_broken_str_never_raises():
    assert normalize_error(_UnprintableWithMessage()).to_dict() == {  # nosec B101
        "name": "_UnprintableWithMessage",
        "message": "has a message",
    }
    assert normalize_error(_Unprintable()).to_dict() == {"name": "_Unprintable"}  # nosec B101


def test_raised_exception_with_broken_str_keeps_a_shape():
    try:
        raise _Unprintable()
    except _Unprintable as exc:
        result = normalize_error(exc)
    assert result.name == "_Unprintable" and result.message is None  # nosec B101
