#!/usr/bin/env python3
"""
Environment variable readers for the XSD tree service.

Values coming from `.env` files edited on Windows frequently carry a trailing
carriage return, which breaks integer parsing and suffix comparisons, so every
reader here goes through getenv_clean first.
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)


def getenv_clean(key: str, default: Optional[str] = None) -> Optional[str]:
    """Read an environment variable with surrounding whitespace and CR/LF removed.

    Args:
        key: Environment variable name
        default: Value returned when the variable is unset

    Returns:
        Cleaned value, or default when unset
    """
    raw_value = os.getenv(key)
    if raw_value is None:
        return default

    cleaned = raw_value.strip()
    if cleaned != raw_value:
        logger.warning(f"Environment variable {key} contained surrounding whitespace: {raw_value!r}")
    return cleaned


def getenv_int(key: str, default: int) -> int:
    """Read an integer setting, falling back to default when unset or not a number."""
    value = getenv_clean(key)
    if not value:
        return default

    try:
        return int(value)
    except ValueError:
        logger.warning(f"Environment variable {key}={value!r} is not an integer, using {default}")
        return default


def getenv_list(key: str, default: list[str], separator: str = ",") -> list[str]:
    """Read a separated list setting such as `.xsd,.xml`.

    Empty items are dropped; an empty or unset variable yields default.
    """
    value = getenv_clean(key)
    if not value:
        return list(default)

    items = [item.strip() for item in value.split(separator) if item.strip()]
    return items or list(default)
