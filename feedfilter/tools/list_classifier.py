from typing import Any

from feedfilter.tools.popularity import extract_popularity

# Heuristic constants. Only a prefix of each list is sampled; later items are
# assumed to share the shape of the first ones.
SAMPLE_SIZE = 12
MIN_OBJECT_RATIO = 0.5
MIN_POPULARITY_HITS = 1


def is_candidate_list(arr: Any) -> bool:
    """True when arr looks like a list of items carrying a popularity field.

    Requires a majority of dict elements in the sample (rules out lists of
    strings/numbers) and at least one sampled item with an extractable
    popularity (rules out unrelated object lists such as tags).
    """
    if not isinstance(arr, list) or not arr:
        return False
    sample = arr[:SAMPLE_SIZE]
    objects = sum(1 for x in sample if isinstance(x, dict))
    hits = sum(1 for x in sample if extract_popularity(x) is not None)
    return objects / len(sample) > MIN_OBJECT_RATIO and hits >= MIN_POPULARITY_HITS
