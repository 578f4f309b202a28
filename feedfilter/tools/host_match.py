import logging
import re
from typing import Iterable

logger = logging.getLogger(__name__)


def host_matches(host: str, domains: Iterable[str]) -> bool:
    """True if host equals one of domains or is a subdomain of one.

    An empty domain list matches every host.
    """
    h = (host or '').split(':')[0].lower()
    domains = [d.lower() for d in domains if d]
    if not domains:
        return True
    return any(h == d or h.endswith('.' + d) for d in domains)


def path_matches(path: str, pattern: str) -> bool:
    """Search pattern in path; an empty pattern matches every path."""
    if not pattern:
        return True
    try:
        return bool(re.search(pattern, path or ''))
    except re.error as e:
        logger.warning("invalid filter_path pattern %r: %s", pattern, e)
        return False
