"""
FeedFilter: drop low-popularity items from JSON feed responses.

Runs as a mitmproxy addon (see interceptor_addon.py).
"""

__version__ = '1.0.0'
