"""
Response body filter.

Turns one raw response body into either a rewritten JSON body with low
popularity items removed, or a passthrough signal. Never raises: every
failure resolves to passthrough of the original body.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional

from feedfilter.tools.walker import DocumentWalker

logger = logging.getLogger(__name__)

JSON_LEAD_CHARS = ('{', '[')


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON
    raise ValueError(f"non-JSON constant {name}")


@dataclass
class FilterResult:
    """Outcome of filtering one body.

    ``body`` is None for passthrough; ``reason`` tells why.
    """
    body: Optional[str]
    reason: str
    lists_matched: int = 0
    items_dropped: int = 0

    @property
    def passthrough(self) -> bool:
        return self.body is None


def _as_text(body: Any) -> Optional[str]:
    if isinstance(body, str):
        return body
    if isinstance(body, (bytes, bytearray, memoryview)):
        try:
            return bytes(body).decode('utf-8')
        except UnicodeDecodeError:
            return None
    try:
        return str(body)
    except Exception:
        return None


def filter_body(body: Any, threshold: int, enabled: bool = True) -> FilterResult:
    """Filter a JSON response body.

    Args:
        body: Raw body (str, bytes or None)
        threshold: Minimum popularity an item needs to be kept
        enabled: When False candidate lists are walked but not filtered

    Returns:
        FilterResult; ``body`` is the serialized document or None to leave
        the response untouched.
    """
    try:
        if body is None:
            return FilterResult(None, 'no-body')

        text = _as_text(body)
        if text is None:
            return FilterResult(None, 'not-text')

        stripped = text.lstrip()
        if not stripped or stripped[0] not in JSON_LEAD_CHARS:
            return FilterResult(None, 'not-json')

        try:
            doc = json.loads(text, parse_constant=_reject_constant)
        except ValueError:
            return FilterResult(None, 'parse-error')

        walker = DocumentWalker(threshold, enabled)
        # allow_nan=False: overflowing numbers (1e400) parse to inf and must not
        # be written back as Infinity
        out = json.dumps(walker.walk(doc), ensure_ascii=False, separators=(',', ':'), allow_nan=False)
        return FilterResult(out, 'filtered', walker.lists_matched, walker.items_dropped)
    except Exception as e:
        logger.warning("body filter failed, passing through: %s: %s", type(e).__name__, e)
        return FilterResult(None, 'error')
