"""
Standalone provider implementations.

File-based implementations of the provider interfaces.
"""

from .config import StandaloneConfigProvider
from .audit import StandaloneAuditLogger

__all__ = [
    'StandaloneConfigProvider',
    'StandaloneAuditLogger',
]
