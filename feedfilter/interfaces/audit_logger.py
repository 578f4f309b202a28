"""
Audit logger interface.

Defines how per-response filter decisions are recorded.
"""

from abc import ABC, abstractmethod
from typing import Optional


class AuditLogger(ABC):
    """Abstract audit logger interface"""

    @abstractmethod
    def log_filtered(
        self,
        host: str,
        path: str,
        threshold: int,
        lists_matched: int,
        items_dropped: int,
    ) -> bool:
        """
        Log a response whose body was rewritten.

        Args:
            host: Request host
            path: Request path
            threshold: Minimum popularity applied
            lists_matched: Number of candidate lists found
            items_dropped: Number of items removed

        Returns:
            True if logged successfully, False otherwise
        """
        pass

    @abstractmethod
    def log_passthrough(self, host: str, path: str, reason: str) -> bool:
        """
        Log a response left unmodified.

        Args:
            host: Request host
            path: Request path
            reason: Passthrough reason (not-json, parse-error, ...)

        Returns:
            True if logged successfully, False otherwise
        """
        pass

    @abstractmethod
    def log_error(self, message: str, host: Optional[str] = None) -> bool:
        """
        Log an unexpected error in the addon hook.

        Returns:
            True if logged successfully, False otherwise
        """
        pass
