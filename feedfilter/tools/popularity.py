"""Popularity extraction for feed items of unknown shape.

Feed APIs drift between versions and endpoints, so the play/view count of an
item may live at several places. Each strategy below is one fixed lookup
path; they are tried in order and the first one yielding a usable integer
wins.
"""

import math
import re
from typing import Any, Callable, Dict, List, Optional, Sequence

_NON_DIGITS = re.compile(r'\D+')


def _first_present(obj: Any, keys: Sequence[str]) -> Any:
    """Return the value of the first key present (and not null) in obj."""
    if not isinstance(obj, dict):
        return None
    for k in keys:
        v = obj.get(k)
        if v is not None:
            return v
    return None


def _sub(obj: Any, *path: str) -> Optional[Dict[str, Any]]:
    for key in path:
        if not isinstance(obj, dict):
            return None
        obj = obj.get(key)
    return obj if isinstance(obj, dict) else None


def to_count(raw: Any) -> Optional[int]:
    """Normalize a raw popularity value to an int.

    Strings keep only their digits ("1.2万" -> 12, "3,401" -> 3401); an empty
    result is not a count. Numbers are truncated. Everything else is None.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, str):
        digits = _NON_DIGITS.sub('', raw)
        if not digits:
            return None
        return int(digits)
    if isinstance(raw, int):
        return raw
    if isinstance(raw, float):
        if not math.isfinite(raw):
            return None
        return int(raw)
    return None


Strategy = Callable[[Dict[str, Any]], Any]

STRATEGIES: List[Strategy] = [
    lambda item: _first_present(_sub(item, 'stat'), ('play', 'view', 'playCount', 'views')),
    lambda item: _first_present(item, ('play', 'play_count', 'playCount', 'view', 'views')),
    lambda item: _first_present(_sub(item, 'stat'), ('view_count',)),
    lambda item: _first_present(_sub(item, 'data'), ('play', 'view')),
    lambda item: _first_present(_sub(item, 'archive', 'stat'), ('view',)),
]


def extract_popularity(item: Any) -> Optional[int]:
    """Return the item's popularity, or None when it cannot be determined."""
    if not isinstance(item, dict):
        return None
    for strategy in STRATEGIES:
        try:
            count = to_count(strategy(item))
        except Exception:
            continue
        if count is not None:
            return count
    return None
