"""Default request identifier generator."""
from __future__ import annotations

from uuid import uuid4


def generate_request_id() -> str:
    """Return a fresh random request id (uuid4, canonical string form)."""
    return str(uuid4())


__all__ = ["generate_request_id"]
