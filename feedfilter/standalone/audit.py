"""
Standalone audit logger.

Appends one line per filter decision to a local file.
"""

import logging
import os
from datetime import datetime, timezone
from typing import Optional

from feedfilter.interfaces.audit_logger import AuditLogger
from feedfilter.tools.file_store import default_store

logger = logging.getLogger(__name__)


class StandaloneAuditLogger(AuditLogger):
    """Local file-based audit logger"""

    def __init__(self, log_file: Optional[str] = None, debug: bool = False):
        """
        Initialize standalone audit logger.

        Args:
            log_file: Path to log file (default: filtered_responses.log)
            debug: Also record passthrough decisions
        """
        self.log_file = log_file or default_store.get_log_path()
        self.debug = debug

        log_dir = os.path.dirname(self.log_file)
        if log_dir and not os.path.exists(log_dir):
            try:
                os.makedirs(log_dir, exist_ok=True)
            except OSError:
                pass

    def _write_log(self, message: str) -> bool:
        """Write a log message to file"""
        try:
            with open(self.log_file, 'a', encoding='utf-8') as f:
                timestamp = datetime.now(timezone.utc).isoformat()
                f.write(f"[{timestamp}] {message}\n")
            return True
        except OSError as e:
            logger.warning("failed to write audit log: %s", e)
            return False

    def log_filtered(
        self,
        host: str,
        path: str,
        threshold: int,
        lists_matched: int,
        items_dropped: int,
    ) -> bool:
        message = (f"[FILTER] {host}{path} | min_play={threshold} "
                   f"| lists={lists_matched} | dropped={items_dropped}")
        return self._write_log(message)

    def log_passthrough(self, host: str, path: str, reason: str) -> bool:
        if not self.debug:
            return True
        return self._write_log(f"[PASSTHROUGH] {host}{path} | reason={reason}")

    def log_error(self, message: str, host: Optional[str] = None) -> bool:
        prefix = f"{host} | " if host else ""
        return self._write_log(f"[ERROR] {prefix}{message}")
