import json
import logging
import os
from typing import Any, Optional

logger = logging.getLogger(__name__)


class FileStore:
    """Centralized path mapping and basic file I/O helpers.

    - Resolves persistent config path (env override, home directory).
    - Exposes default audit log path anchored at the package dir.
    - Provides JSON read/write and log rotation utilities.
    """

    def __init__(self, base_dir: Optional[str] = None) -> None:
        # base_dir is the package root (feedfilter/)
        self._base_dir = base_dir or os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

    # --- Path mapping ---
    def get_config_path(self) -> str:
        override = os.getenv('FF_CONFIG_PATH')
        if override:
            return override
        try:
            home = os.path.expanduser('~')
            return os.path.join(home, '.feedfilter', 'config.json')
        except Exception:
            # Last resort: package root
            return os.path.join(self._base_dir, 'config.json')

    def get_log_path(self) -> str:
        override = os.getenv('FF_LOG_PATH')
        if override:
            return override
        return os.path.join(self._base_dir, 'filtered_responses.log')

    # --- I/O helpers ---
    def read_json(self, path: str) -> Any:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)

    def write_json(self, path: str, data: Any) -> None:
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)

    def rotate_log_if_needed(self, path: str, max_size_mb: float = 5.0, keep_lines: int = 1000) -> bool:
        """Trim the log at ``path`` to its last ``keep_lines`` lines once it
        grows past ``max_size_mb``. Returns True if the file was rewritten.
        """
        try:
            size = os.path.getsize(path)
        except OSError:
            return False
        if size < max_size_mb * 1024 * 1024:
            return False

        try:
            with open(path, 'r', encoding='utf-8', errors='ignore') as f:
                lines = f.readlines()
            tail = lines[-keep_lines:]
            with open(path, 'w', encoding='utf-8') as f:
                f.write(f"[LOG ROTATED] kept {len(tail)} of {len(lines)} lines\n")
                f.writelines(tail)
        except OSError as e:
            logger.warning("log rotation of %s failed: %s", path, e)
            return False
        logger.debug("rotated %s (%d bytes)", path, size)
        return True


default_store = FileStore()
