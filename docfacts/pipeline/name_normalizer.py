"""Normalization and matching of party names against the tenant."""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from ..models.tenant import Tenant
from .similarity import jaro_winkler_similarity

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize_name(value: Optional[str]) -> str:
    """Normalize a free-text name for comparison.

    Rules:
    - Lowercase
    - Replace every character outside [a-z0-9] and whitespace with a space
    - Collapse whitespace runs to one space
    - Trim

    "Invoid.vision" and "Invoid Vision" both become "invoid vision".
    Accented letters fall outside [a-z] and are replaced like punctuation.
    """
    if not value:
        return ""
    s = _NON_ALNUM.sub(" ", value.lower())
    return _WHITESPACE.sub(" ", s).strip()


def tenant_name_candidates(tenant: Tenant, associated_person_names: Iterable[str] = ()) -> List[str]:
    """Names the tenant may appear under on a document.

    Legal name, display name and associated person names, trimmed, with
    empties dropped and duplicates removed (first occurrence kept).
    """
    raw = [tenant.legal_name, tenant.display_name, *(associated_person_names or ())]
    candidates: List[str] = []
    for name in raw:
        trimmed = (name or "").strip()
        if trimmed and trimmed not in candidates:
            candidates.append(trimmed)
    return candidates


def names_match(a: str, b: str, similarity_threshold: float) -> bool:
    """True if two already-normalized names refer to the same party.

    Equal, one contained in the other, or Jaro-Winkler >= threshold.
    """
    if not a or not b:
        return False
    if a == b or a in b or b in a:
        return True
    return jaro_winkler_similarity(a, b) >= similarity_threshold


def matches_tenant_name(value: Optional[str], candidates: Iterable[str], similarity_threshold: float) -> bool:
    """Check whether an extracted name matches any tenant name candidate.

    Args:
        value: Extracted party name (may be None or blank)
        candidates: Output of tenant_name_candidates()
        similarity_threshold: Minimum Jaro-Winkler score for a fuzzy match

    Returns:
        True if any candidate matches; False for absent or blank values
    """
    normalized_value = normalize_name(value)
    if not normalized_value:
        return False
    return any(
        names_match(normalized_value, normalize_name(candidate), similarity_threshold)
        for candidate in candidates
    )
