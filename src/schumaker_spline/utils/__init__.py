"""Utilities module: input adapters."""

from .conversion import to_ordinal, is_date_like

__all__ = ["to_ordinal", "is_date_like"]
