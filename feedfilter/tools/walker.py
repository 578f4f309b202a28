import logging
from typing import Any

from feedfilter.tools.list_classifier import is_candidate_list
from feedfilter.tools.popularity import extract_popularity

logger = logging.getLogger(__name__)


def keep_item(item: Any, threshold: int) -> bool:
    """Keep items at or above threshold; unknown popularity is always kept."""
    count = extract_popularity(item)
    if count is None:
        return True
    return count >= threshold


class DocumentWalker:
    """Depth-first rewrite of a parsed JSON document.

    Lists classified as feed item lists lose the items below ``threshold``;
    every other node is rebuilt unchanged. Counters describe one walk and
    are never shared between responses.
    """

    def __init__(self, threshold: int, enabled: bool = True) -> None:
        self.threshold = threshold
        self.enabled = enabled
        self.lists_matched = 0
        self.items_dropped = 0

    def walk(self, node: Any) -> Any:
        if isinstance(node, list):
            return self._walk_list(node)
        if isinstance(node, dict):
            return self._walk_dict(node)
        return node

    def _walk_list(self, arr: list) -> list:
        if not is_candidate_list(arr):
            return [self.walk(x) for x in arr]

        self.lists_matched += 1
        if self.enabled:
            kept = [x for x in arr if keep_item(x, self.threshold)]
            self.items_dropped += len(arr) - len(kept)
        else:
            kept = arr
        # only surviving items are descended into
        return [self.walk(x) for x in kept]

    def _walk_dict(self, obj: dict) -> dict:
        out = {}
        for key, value in obj.items():
            try:
                out[key] = self.walk(value)
            except RecursionError:
                # too deep to finish; the whole walk must fail, not a subtree
                raise
            except Exception as e:
                logger.debug("walk failed on key %r, left unmodified: %s", key, e)
                out[key] = value
        return out


def walk(node: Any, threshold: int, enabled: bool = True) -> Any:
    """Walk node once with a fresh DocumentWalker and return the result."""
    return DocumentWalker(threshold, enabled).walk(node)
