"""Runtime settings.

Settings are plain values with defaults that match the reference behaviour of
the language. Each can be overridden through an environment variable:

- ``TYPECALC_TRACE``: set to ``0``, ``false`` or ``off`` to silence the
  per-token trace.
- ``TYPECALC_MAX_LENGTH``: maximum identifier/number length (default 49).
- ``TYPECALC_MAX_SYMBOLS``: upper bound on symbol table capacity (default
  unlimited).


File: config.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import os
from dataclasses import dataclass, replace

MAX_LEXEME_LENGTH = 49
INITIAL_CAPACITY = 8

_FALSY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Settings for a single parse session."""

    trace: bool = True
    max_lexeme_length: int = MAX_LEXEME_LENGTH
    initial_capacity: int = INITIAL_CAPACITY
    max_capacity: int | None = None

    def __post_init__(self):
        if self.max_lexeme_length < 1:
            raise ValueError("max_lexeme_length must be at least 1")
        if self.initial_capacity < 1:
            raise ValueError("initial_capacity must be at least 1")
        if self.max_capacity is not None and self.max_capacity < 1:
            raise ValueError("max_capacity must be at least 1")

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """
        Build settings from ``TYPECALC_*`` environment variables.

        Raises:
            ValueError: If a numeric variable is not a positive integer.
        """
        env = os.environ if environ is None else environ
        kwargs = {}
        trace = env.get("TYPECALC_TRACE")
        if trace is not None:
            kwargs["trace"] = trace.strip().lower() not in _FALSY
        max_length = env.get("TYPECALC_MAX_LENGTH")
        if max_length:
            kwargs["max_lexeme_length"] = int(max_length)
        max_symbols = env.get("TYPECALC_MAX_SYMBOLS")
        if max_symbols:
            kwargs["max_capacity"] = int(max_symbols)
        return cls(**kwargs)

    def with_overrides(self, **changes) -> "Settings":
        """
        Return a copy with every non-None keyword applied.
        """
        return replace(self, **{k: v for k, v in changes.items() if v is not None})
