"""
Provider interfaces.

Abstract interfaces that let the addon work with different configuration
and audit backends without tight coupling.
"""

from .config_provider import ConfigProvider
from .audit_logger import AuditLogger

__all__ = [
    'ConfigProvider',
    'AuditLogger',
]
