"""
Serializable error shape and the default error normalizer.

``normalize_error`` turns any failure value into a :class:`SerializedError`
by whitelisting the string-typed ``name``, ``message``, ``stack`` and
``code`` fields of the source. It never raises.
"""
from __future__ import annotations

import contextlib
import traceback
from collections.abc import Mapping
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict

COMMON_PROPERTIES = ("name", "message", "stack", "code")

_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, bool, type(None))


class SerializedError(BaseModel):
    """Stable, serializable view of a failure.

    All fields are optional strings; absent fields stay ``None`` and are
    omitted by :meth:`to_dict`.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: Optional[str] = None
    message: Optional[str] = None
    stack: Optional[str] = None
    code: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        return self.model_dump(exclude_none=True)


def _read(source: Any, key: str) -> Optional[str]:
    """Return ``source[key]`` / ``source.key`` when it is a string."""
    try:
        value = source.get(key) if isinstance(source, Mapping) else getattr(source, key, None)
    except Exception:  # noqa: BLE001 - hostile accessors must not break normalization
        return None
    return value if isinstance(value, str) else None


def _safe_str(exc: BaseException) -> Optional[str]:
    try:
        return str(exc)
    except Exception:  # noqa: BLE001 - a broken __str__ must not break normalization
        return None


def _exception_fields(exc: BaseException) -> Dict[str, str]:
    fields = {key: value for key in COMMON_PROPERTIES if (value := _read(exc, key)) is not None}
    if type(exc).__module__ == "builtins":
        # ImportError.name / AttributeError.name hold the missing symbol
        fields.pop("name", None)
    fields.setdefault("name", type(exc).__name__)
    if "message" not in fields and (text := _safe_str(exc)) is not None:
        fields["message"] = text
    if "stack" not in fields and exc.__traceback__ is not None:
        with contextlib.suppress(Exception):
            fields["stack"] = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    return fields


def normalize_error(value: Any) -> SerializedError:
    """Normalize an arbitrary failure value into a :class:`SerializedError`.

    - Scalars (``None``, strings, numbers, booleans) become ``message=str(value)``
      in Python spelling: ``True`` gives ``"True"``, ``None`` gives ``"None"``
      and ``1.0`` gives ``"1.0"``.
    - Exceptions contribute their class name, message and traceback unless
      they carry explicit string ``name``/``message``/``stack`` attributes.
      An exception whose ``__str__`` raises gets no derived message.
    - Mappings and other objects contribute only string-valued common fields.
    """
    if isinstance(value, _SCALAR_TYPES):
        return SerializedError(message=str(value))
    if isinstance(value, BaseException):
        return SerializedError(**_exception_fields(value))
    return SerializedError(
        **{key: text for key in COMMON_PROPERTIES if (text := _read(value, key)) is not None}
    )


__all__ = ["COMMON_PROPERTIES", "SerializedError", "normalize_error"]
