"""
Environment variable configuration for FeedFilter.

===============================================================================
FILTER BEHAVIOUR
===============================================================================
FF_MIN_PLAY                 Minimum popularity (play/view count) an item needs
                            to stay in a feed list. Items below it are dropped.
                            Default: 0 (keep everything until configured)
                            Used by: Config provider, addon options

FF_FILTER_ENABLED           Enable filtering: '1', 'true', 'yes', 'on'
                            When disabled the walker still runs but every
                            candidate list is returned unfiltered.
                            Default: '1' (enabled)
                            Used by: Config provider, addon options

FF_FILTER_HOSTS             Semicolon or comma separated list of domains whose
                            responses are filtered (subdomains included).
                            Empty string means every host.
                            Default: 'bilibili.com;biliapi.net;biliapi.com'
                            Used by: Host matching

FF_FILTER_PATH              Regular expression searched in the request path.
                            Empty string means every path.
                            Default: '' (all paths)
                            Used by: Host matching

===============================================================================
DIAGNOSTICS
===============================================================================
FF_DEBUG                    Enable debug logging: '1', 'true', 'yes', 'on'
                            Also writes passthrough records to the audit log.
                            Default: '0' (disabled)

FF_CONFIG_PATH              Path to config JSON file
                            Default: '~/.feedfilter/config.json'

FF_LOG_PATH                 Path to audit log file
                            Default: '<package dir>/filtered_responses.log'

===============================================================================
USAGE EXAMPLES
===============================================================================

Linux/Mac:
    export FF_MIN_PLAY=5000
    mitmdump -s feedfilter/interceptor_addon.py --listen-port 8081

Per-run override through mitmproxy options:
    mitmdump -s feedfilter/interceptor_addon.py --set min_play=20000

===============================================================================
"""

import os
import re
from typing import Any, List, Optional

DEFAULT_MIN_PLAY = 0
DEFAULT_FILTER_HOSTS = 'bilibili.com;biliapi.net;biliapi.com'

_TRUTHY = ('1', 'true', 'yes', 'on')
_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_flag(value: Any, default: bool = False) -> bool:
    """Interpret a config/env value as a boolean switch."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in _TRUTHY


def parse_threshold(value: Any, default: int = DEFAULT_MIN_PLAY) -> int:
    """Parse a minimum popularity threshold.

    Accepts ints and strings with a leading integer ("5000", " 12abc").
    Unparsable values fall back to ``default``; negatives clamp to 0.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        try:
            return max(0, int(value))
        except (OverflowError, ValueError):
            return default
    m = _LEADING_INT.match(str(value))
    if not m:
        return default
    return max(0, int(m.group(1)))


def split_hosts(value: Optional[str]) -> List[str]:
    """Split a ';' or ',' separated host list into lowercase entries."""
    hosts: List[str] = []
    for h in re.split(r'[;,]', value or ''):
        if h and h.strip():
            hosts.append(h.strip().lower())
    return hosts


class EnvironConfig:
    """Environment variable configuration helper"""

    MIN_PLAY = os.getenv('FF_MIN_PLAY')  # Optional override
    FILTER_ENABLED = os.getenv('FF_FILTER_ENABLED')  # Optional override
    FILTER_HOSTS = os.getenv('FF_FILTER_HOSTS')  # Optional override
    FILTER_PATH = os.getenv('FF_FILTER_PATH')  # Optional override
    DEBUG = os.getenv('FF_DEBUG', '0').lower() in _TRUTHY

    CONFIG_PATH = os.getenv('FF_CONFIG_PATH')
    LOG_PATH = os.getenv('FF_LOG_PATH')

    @classmethod
    def get_info(cls) -> dict:
        """Get environment overrides for logging/debugging"""
        return {
            'min_play': cls.MIN_PLAY,
            'filter_enabled': cls.FILTER_ENABLED,
            'filter_hosts': cls.FILTER_HOSTS,
            'filter_path': cls.FILTER_PATH,
            'debug': cls.DEBUG,
        }


# Export singleton instance
env_config = EnvironConfig()
