"""Utilities for normalizing VAT numbers at the parsing boundary."""

import re
from typing import Optional

_NON_ALNUM = re.compile(r"[^A-Z0-9]")


def normalize_vat(text: Optional[str]) -> Optional[str]:
    """Normalize a raw VAT string to its canonical comparison form.

    Rules:
    - Uppercase
    - Strip whitespace and punctuation (dots, dashes, slashes)
    - Keep the country prefix as written
    - Return None for None or input with no alphanumeric content

    "be 0123.456.789" -> "BE0123456789"
    """
    if text is None:
        return None
    cleaned = _NON_ALNUM.sub("", text.upper())
    return cleaned or None
