"""Cancellation parts package; import from ``async_lifecycle.base.cancellation``."""
