"""Environment helpers for secret-file resolution."""

from __future__ import annotations

import os
from typing import Callable, Optional

EnvLookup = Callable[[str], Optional[str]]

# str.isspace() accepts these, but they are content in a key file:
# no-break spaces and NEL.
_NON_BLANK_SPACES = frozenset("\u00a0\u2007\u202f\u0085")


def get_env(name: str) -> Optional[str]:
    """Return the process environment value for *name*, or None when unset."""
    return os.environ.get(name)


def is_blank(value: Optional[str]) -> bool:
    if value is None:
        return True
    return all(char.isspace() and char not in _NON_BLANK_SPACES for char in value)
